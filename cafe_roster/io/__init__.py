"""I/O utilities: sheet fetch, CSV parsing and normalization, CSV export."""

from .parse_table import parse_table
from .normalize import NormalizedSheet, normalize_rows
from .fetch import IngestionError, fetch_sheet_csv, read_csv_file
from .export_csv import export_load_csv, export_roster_csv

__all__ = [
    "parse_table",
    "NormalizedSheet",
    "normalize_rows",
    "IngestionError",
    "fetch_sheet_csv",
    "read_csv_file",
    "export_load_csv",
    "export_roster_csv",
]
