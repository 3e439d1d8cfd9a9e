import sys
import pathlib
# Add project root to sys.path so imports from repo root work when running the tests
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent))

import pytest

from library_lending import Book, Borrower, Inventory


@pytest.fixture
def inventory():
    inv = Inventory()
    for title in ["1984", "To Kill a Mockingbird", "Don Quixote"]:
        inv.add_book(Book(title))
    return inv


@pytest.fixture
def student():
    return Borrower.student("Alice")


@pytest.fixture
def faculty():
    return Borrower.faculty("Dr. Smith")
