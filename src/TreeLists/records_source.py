"""Load input records from JSON text, files, or an HTTP endpoint."""

from __future__ import annotations

import json
import logging

import requests

from TreeLists.models import Record
from TreeLists.tree_builder import parse_records

logger = logging.getLogger(__name__)

SAMPLE_RECORDS: list[Record] = [
    Record(name="Lakberendezés, világítás, bútor", count=38),
    Record(name="Lakberendezés, világítás, bútor|Bútor", count=37),
    Record(name="Lakberendezés, világítás, bútor|Bútor|Nappali bútor", count=25),
    Record(name="Lakberendezés, világítás, bútor|Bútor|Hálószoba bútor", count=10),
    Record(name="Lakberendezés, világítás, bútor|Bútor|Ifjúsági bútor", count=2),
    Record(name="Lakberendezés, világítás, bútor|Világítás", count=1),
]


class RecordsSourceError(Exception):
    """Raised when records cannot be loaded."""


def load_json_text(text: str) -> list[Record]:
    """Parse a JSON array of ``{"name": ..., "count": ...}`` objects."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecordsSourceError(f"Invalid JSON: {exc}") from exc
    return parse_records(data)


def load_json_bytes(data: bytes, filename: str = "upload") -> list[Record]:
    """Parse an uploaded UTF-8 JSON file."""
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise RecordsSourceError(f"{filename} is not UTF-8 text.") from exc
    return load_json_text(text)


class RecordsClient:
    """Fetch records from a JSON endpoint."""

    def __init__(self, token: str | None = None):
        self.session = requests.Session()
        self.session.headers["Accept"] = "application/json"
        self.session.headers["User-Agent"] = "TreeLists/1.0"
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def fetch(self, url: str) -> list[Record]:
        resp = self.session.get(url, timeout=30)

        if resp.status_code == 404:
            raise RecordsSourceError("Records not found. Check the URL.")
        if resp.status_code == 401:
            raise RecordsSourceError("Authentication failed. Check your token.")
        if resp.status_code == 403:
            raise RecordsSourceError("Access denied. The token may lack permissions.")
        resp.raise_for_status()

        try:
            data = resp.json()
        except ValueError as exc:
            raise RecordsSourceError(f"Response from {url} is not JSON.") from exc

        records = parse_records(data)
        logger.info("Fetched %d records from %s", len(records), url)
        return records
