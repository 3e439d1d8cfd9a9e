"""
lending_reports.py

Tabular reports over the lending model, built as pandas DataFrames.
"""

from __future__ import annotations
from typing import Dict, Iterable, List

import pandas as pd

from library_lending import Borrower, Inventory

INVENTORY_COLUMNS = ["Title", "Availability"]
BORROWER_COLUMNS = ["Name", "Kind", "BorrowedCount", "BorrowedBooks"]


def inventory_frame(inventory: Inventory) -> pd.DataFrame:
    """
    Produce a DataFrame suitable for reporting the books inventory.

    One row per book in insertion order, with a human-friendly Availability value.
    """
    rows = [{"Title": b.title, "Availability": b.state.value} for b in inventory]
    return pd.DataFrame(rows, columns=INVENTORY_COLUMNS)


def borrowers_frame(borrowers: Iterable[Borrower]) -> pd.DataFrame:
    """
    Build a DataFrame summarizing borrowers and their current borrowed books.

    Returns columns: Name, Kind, BorrowedCount, BorrowedBooks (comma separated).
    """
    rows = []
    for borrower in borrowers:
        titles = borrower.list_borrowed_books()
        rows.append({
            "Name": borrower.name,
            "Kind": borrower.kind.value,
            "BorrowedCount": len(titles),
            "BorrowedBooks": ",".join(titles)
        })
    return pd.DataFrame(rows, columns=BORROWER_COLUMNS)


def borrowers_with_books(borrowers: Iterable[Borrower]) -> List[Dict]:
    """Return the borrowers currently holding one or more books."""
    return [{"Name": b.name, "Kind": b.kind.value, "BorrowedBooks": b.list_borrowed_books()}
            for b in borrowers if b.borrowed_count > 0]
