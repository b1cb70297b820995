"""Comma-separated text to rows of string cells."""

from __future__ import annotations

import io
from typing import List

import pandas as pd


def parse_table(text: str) -> List[List[str]]:
    """
    Split delimited text into rows of cells.

    Quoted fields may contain commas and line breaks; ``""`` inside quotes is a
    literal quote. CRLF counts as one row break and blank lines yield no row.
    A final row without a trailing newline is still returned, and a quoted
    empty cell alone on its line is a row of one empty cell.

    The result is rectangular: rows shorter than the widest row are padded
    with empty cells. Trailing columns that are empty in every row, header
    included, are dropped.

    Args:
        text: Raw sheet export

    Returns:
        List of rows, each a list of cell strings
    """
    # No record can hold more fields than the text has commas, plus one
    width = text.count(",") + 1
    try:
        df = pd.read_csv(
            io.StringIO(text),
            header=None,
            names=range(width),
            index_col=False,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return []
    if df.empty:
        return []

    df = df.fillna("")
    used = (df != "").any(axis=0).to_numpy().nonzero()[0]
    last = int(used[-1]) + 1 if len(used) else 1
    return df.iloc[:, :last].values.tolist()
