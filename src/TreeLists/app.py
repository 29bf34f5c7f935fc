"""Streamlit UI for TreeLists."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING

import requests
import streamlit as st

from TreeLists import token_store
from TreeLists.input_source import ClickEvent, InputSource
from TreeLists.models import DEFAULT_DELIMITER, Node, PathTree, Record, TreeError
from TreeLists.records_source import (
    SAMPLE_RECORDS,
    RecordsClient,
    RecordsSourceError,
    load_json_bytes,
    load_json_text,
)
from TreeLists.renderers.html import HtmlRenderer
from TreeLists.renderers.markdown import MarkdownRenderer
from TreeLists.renderers.text import TextRenderer
from TreeLists.selection import SelectionController
from TreeLists.tree_builder import build_tree

if TYPE_CHECKING:
    from streamlit.runtime.uploaded_file_manager import UploadedFile

_SOURCES = ("Sample", "JSON", "File", "URL")


@dataclass
class TreeView:
    """Everything that must survive Streamlit reruns for one built tree."""

    tree: PathTree
    renderer: HtmlRenderer
    controller: SelectionController
    source: InputSource
    expanded: set[str] = field(default_factory=set)


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def main() -> None:
    st.set_page_config(
        page_title="TreeLists",
        page_icon="🌳",
        layout="wide",
    )

    # Hide Streamlit's default toolbar (Deploy, Stop, etc.)
    st.markdown(
        "<style>[data-testid='stToolbar'] { display: none; }</style>",
        unsafe_allow_html=True,
    )

    # --- Header with settings popover ---
    header_left, header_right = st.columns([8, 1])
    with header_left:
        st.title("TreeLists")
    with header_right:
        st.markdown("<div style='height: 1.5rem'></div>", unsafe_allow_html=True)
        with st.popover("", use_container_width=True):
            st.subheader("Settings")
            saved_token = token_store.load_token() or ""
            token = st.text_input(
                "Records endpoint token (optional)",
                value=saved_token,
                type="password",
                help="Sent as a Bearer token when loading records from a URL.",
            )
            if token_store.is_available():
                remember = st.checkbox(
                    "Save token to OS keychain",
                    value=bool(saved_token),
                )
                if remember and token != saved_token:
                    token_store.remember_token(token)
                elif not remember and saved_token:
                    token_store.forget_token()

    st.caption(
        "Show delimiter-qualified category names as a collapsible tree. "
        "Click a node to highlight it together with all of its ancestors."
    )

    # --- Input ---
    default_url = _qp("url")
    source_kind = st.radio(
        "Records",
        _SOURCES,
        index=_SOURCES.index("URL") if default_url else 0,
        horizontal=True,
    )

    raw_json = ""
    url = ""
    upload = None
    if source_kind == "JSON":
        raw_json = st.text_area(
            "Records (JSON)",
            value=json.dumps([asdict(r) for r in SAMPLE_RECORDS], ensure_ascii=False, indent=2),
            height=220,
            help='A list of {"name": ..., "count": ...} objects. Parents must come before their children.',
        )
    elif source_kind == "File":
        upload = st.file_uploader(
            "Records file (JSON)",
            type=["json"],
            help="UTF-8 JSON in the same format as the JSON source.",
        )
    elif source_kind == "URL":
        url = st.text_input(
            "Records URL",
            value=default_url,
            placeholder="https://example.com/categories.json",
        )

    delimiter = st.text_input(
        "Delimiter",
        value=_qp("delimiter", DEFAULT_DELIMITER),
        max_chars=5,
    )

    build_clicked = st.button(
        "Build tree",
        type="primary",
        use_container_width=True,
        disabled=not delimiter,
    )

    if build_clicked:
        records = _load_records(source_kind, raw_json, upload, url, token)
        if records is not None:
            _build_view(records, delimiter)

    if "view" in st.session_state:
        _show_view(st.session_state["view"])


def _load_records(
    source_kind: str,
    raw_json: str,
    upload: UploadedFile | None,
    url: str,
    token: str,
) -> list[Record] | None:
    try:
        if source_kind == "JSON":
            return load_json_text(raw_json)
        if source_kind == "File":
            if upload is None:
                st.error("Please choose a records file.")
                return None
            return load_json_bytes(upload.getvalue(), upload.name)
        if source_kind == "URL":
            if not url.strip():
                st.error("Please enter a records URL.")
                return None
            with st.spinner("Fetching records..."):
                return RecordsClient(token=token.strip() or None).fetch(url.strip())
        return list(SAMPLE_RECORDS)
    except (RecordsSourceError, TreeError) as exc:
        st.error(str(exc))
    except requests.RequestException as exc:
        st.error(f"Request failed: {exc}")
    return None


def _build_view(records: list[Record], delimiter: str) -> None:
    try:
        tree = build_tree(records, delimiter)
    except TreeError as exc:
        st.session_state.pop("view", None)
        st.error(str(exc))
        return

    renderer = HtmlRenderer()
    controller = SelectionController(tree, renderer)
    source = InputSource(tree)
    controller.attach(source)
    st.session_state["view"] = TreeView(
        tree=tree,
        renderer=renderer,
        controller=controller,
        source=source,
    )
    st.info(f"Built {len(tree)} nodes under {len(tree.roots)} roots.")


def _show_view(view: TreeView) -> None:
    activated = view.controller.get_activated()
    if activated is not None:
        st.success(f"Active: {activated.path}")
    else:
        st.caption("Nothing selected.")

    for root in view.tree:
        _show_node(view, root, depth=0)

    st.button("Clear selection", on_click=view.controller.clear)

    active = view.renderer.active_paths
    with st.expander("Text", expanded=False):
        st.code(TextRenderer(active_paths=active).render(view.tree), language="text")

    col_html, col_md = st.columns(2)
    with col_html:
        st.download_button(
            label="Download HTML",
            data=view.renderer.render(view.tree),
            file_name="tree.html",
            mime="text/html",
            use_container_width=True,
        )
    with col_md:
        st.download_button(
            label="Download Markdown",
            data=MarkdownRenderer(active_paths=active).render(view.tree),
            file_name="tree.md",
            mime="text/markdown",
            use_container_width=True,
        )


def _show_node(view: TreeView, node: Node, depth: int) -> None:
    _, toggle, label = st.columns([depth + 1, 1, 24])
    is_open = node.path in view.expanded
    with toggle:
        if node.children:
            st.button(
                "▾" if is_open else "▸",
                key=f"toggle:{node.path}",
                on_click=_toggle_expanded,
                args=(view, node.path),
            )
    with label:
        st.button(
            node.label,
            key=f"node:{node.path}",
            type="primary" if view.renderer.is_active(node) else "secondary",
            on_click=view.source.dispatch,
            args=(ClickEvent(node.path),),
        )

    if is_open:
        for child in node.children.values():
            _show_node(view, child, depth + 1)


def _toggle_expanded(view: TreeView, path: str) -> None:
    if path in view.expanded:
        view.expanded.discard(path)
    else:
        view.expanded.add(path)


if __name__ == "__main__":
    main()
