#!/usr/bin/env python3
"""
lending_demo.py

Scripted lending session: three books, one student and one faculty member.
"""

from __future__ import annotations
import logging
from typing import Optional

from library_lending import Book, Borrower, Inventory, LendingError
from lending_reports import borrowers_frame, inventory_frame

# Logging
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger("LibraryLending")

DEMO_TITLES = ["1984", "To Kill a Mockingbird", "Don Quixote"]


def build_inventory() -> Inventory:
    inventory = Inventory()
    for title in DEMO_TITLES:
        inventory.add_book(Book(title))
    return inventory


def borrow_title(inventory: Inventory, borrower: Borrower, title: str) -> Optional[bool]:
    """
    Resolve `title` and borrow it for `borrower`, printing the outcome.

    Returns the borrow result, or None when the title is not in the inventory.
    """
    book = inventory.find_book_by_title(title)
    if book is None:
        print(LendingError.TITLE_NOT_FOUND.message(title=title))
        return None
    ok, msg = borrower.borrow_book(book)
    print(msg)
    return ok


def return_title(inventory: Inventory, borrower: Borrower, title: str) -> Optional[bool]:
    book = inventory.find_book_by_title(title)
    if book is None:
        print(LendingError.TITLE_NOT_FOUND.message(title=title))
        return None
    ok, msg = borrower.return_book(book)
    print(msg)
    return ok


def demo_run():
    """
    Run the fixed lending scenario and print each result followed by the reports.
    """
    inventory = build_inventory()
    student = Borrower.student("Alice")
    faculty = Borrower.faculty("Dr. Smith")

    print("\n--- Borrowing ---")
    borrow_title(inventory, student, "1984")
    borrow_title(inventory, student, "Don Quixote")
    borrow_title(inventory, faculty, "To Kill a Mockingbird")
    borrow_title(inventory, faculty, "1984")

    print("\n--- Borrowed books ---")
    print(student.borrowed_books_message())

    print("\n--- Returning ---")
    return_title(inventory, student, "1984")

    print("\n--- Borrowed books ---")
    print(student.borrowed_books_message())
    print(faculty.borrowed_books_message())

    print("\n--- Lookup ---")
    borrow_title(inventory, faculty, "Moby Dick")

    print("\n--- Inventory ---")
    print(inventory_frame(inventory).to_string(index=False))
    print("\n--- Borrowers ---")
    print(borrowers_frame([student, faculty]).to_string(index=False))
    logger.info("Demo session finished")
    return inventory, student, faculty


if __name__ == "__main__":
    demo_run()
