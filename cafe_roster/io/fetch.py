"""Fetch the registration sheet as CSV text."""

from __future__ import annotations

import asyncio
import ssl
import time
import urllib.error
import urllib.parse
import urllib.request
from pathlib import Path

import certifi


USER_AGENT = "Mozilla/5.0 (CafeRoster/1.0)"


class IngestionError(RuntimeError):
    """The registration source could not be read; safe to retry."""


def with_cache_buster(url: str) -> str:
    parts = urllib.parse.urlsplit(url)
    query = urllib.parse.parse_qsl(parts.query, keep_blank_values=True)
    query = [(k, v) for k, v in query if k != "t"]
    query.append(("t", str(int(time.time() * 1000))))
    return urllib.parse.urlunsplit(parts._replace(query=urllib.parse.urlencode(query)))


def _download(url: str, timeout: float) -> str:
    ctx = ssl.create_default_context(cafile=certifi.where())
    req = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    try:
        with urllib.request.urlopen(req, context=ctx, timeout=timeout) as resp:
            status = getattr(resp, "status", 200)
            if status != 200:
                raise IngestionError(f"Failed to fetch sheet data: HTTP {status}")
            data = resp.read()
    except urllib.error.HTTPError as e:
        raise IngestionError(f"Failed to fetch sheet data: HTTP {e.code}") from e
    except (urllib.error.URLError, OSError) as e:
        raise IngestionError(f"Failed to fetch sheet data: {e}") from e
    return data.decode("utf-8-sig", errors="replace")


async def fetch_sheet_csv(url: str, timeout: float = 30.0) -> str:
    """
    Download the sheet's CSV export in one round trip.

    Args:
        url: CSV export URL
        timeout: Socket timeout in seconds

    Returns:
        The complete response body as text

    Raises:
        IngestionError: On transport errors or a non-success status
    """
    return await asyncio.to_thread(_download, with_cache_buster(url), timeout)


async def read_csv_file(path: str | Path) -> str:
    """Local-file counterpart of ``fetch_sheet_csv``."""
    try:
        raw = await asyncio.to_thread(Path(path).read_bytes)
    except OSError as e:
        raise IngestionError(f"Failed to read {path}: {e}") from e
    return raw.decode("utf-8-sig", errors="replace")
