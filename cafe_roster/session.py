"""Ingestion session: registrations and directory for one working session."""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Awaitable, Callable, Dict, Optional

from cafe_roster.directory import RosterDirectory
from cafe_roster.domain.types import Registration
from cafe_roster.io.fetch import IngestionError
from cafe_roster.io.normalize import normalize_rows
from cafe_roster.io.parse_table import parse_table


Fetcher = Callable[[], Awaitable[str]]


class IngestionSession:
    """
    Holds the latest successfully ingested registrations.

    State is replaced only after a fetch completes and parses; a failed or
    abandoned refresh leaves the previous registrations and directory intact.
    """

    def __init__(self, directory: RosterDirectory, fetcher: Fetcher, reason_separator: str = " | "):
        self.directory = directory
        self.fetcher = fetcher
        self.reason_separator = reason_separator
        self.registrations: Dict[str, Registration] = {}
        self.last_updated: Optional[datetime] = None
        self.error: Optional[IngestionError] = None
        self._lock = asyncio.Lock()

    async def refresh(self) -> Dict[str, Registration]:
        """
        Fetch, parse and normalize the sheet, then swap in the result.

        Concurrent calls run one at a time.

        Raises:
            IngestionError: If the fetch fails (recorded on ``self.error``)
        """
        async with self._lock:
            try:
                text = await self.fetcher()
            except IngestionError as e:
                self.error = e
                print(f"[ERROR] Ingestion failed: {e}")
                raise

            sheet = normalize_rows(parse_table(text), self.reason_separator)
            directory = self.directory.copy()
            added = directory.extend(sheet.names)

            self.directory = directory
            self.registrations = dict(sheet.registrations)
            self.last_updated = datetime.now()
            self.error = None
            print(f"[INFO] Ingested {len(sheet)} registrations ({len(added)} new employees)")
            return self.registrations
