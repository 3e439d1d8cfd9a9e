"""
library_lending.py

In-memory lending model: books, borrowers with kind-specific borrowing policies
and an inventory that resolves titles to books.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

# Configuration
STUDENT_BORROW_LIMIT = 5

# Logging
logger = logging.getLogger("LibraryLending")


class BookState(Enum):
    AVAILABLE = "Available"
    BORROWED = "Borrowed"


class BorrowerKind(Enum):
    STUDENT = "Student"
    FACULTY = "Faculty"


class LendingError(Enum):
    """Recoverable lending outcomes; each value is the message template."""
    BOOK_UNAVAILABLE = "Book '{title}' is currently unavailable."
    BORROW_LIMIT_EXCEEDED = "{name} has reached the borrowing limit of {limit} books."
    NOT_BORROWED_BY_USER = "Book '{title}' was not borrowed by {name}."
    TITLE_NOT_FOUND = "Book '{title}' not found in inventory."

    def message(self, **fields) -> str:
        return self.value.format(**fields)


# ---------------- Book ----------------
class Book:
    """
    A single lendable copy identified by its title.

    Books compare by identity, so two copies sharing a title stay distinct.
    Which borrower holds a book is tracked by the borrower, not here.
    """

    def __init__(self, title: str):
        if not title or not title.strip():
            raise ValueError("Book title is required")
        self._title = title
        self.available = True

    def __repr__(self) -> str:
        return f"Book(title={self._title!r}, available={self.available!r})"

    @property
    def title(self) -> str:
        return self._title

    @property
    def state(self) -> BookState:
        return BookState.AVAILABLE if self.available else BookState.BORROWED

    def is_available(self) -> bool:
        return self.available

    def borrow(self) -> bool:
        """
        Mark the book as borrowed.

        Returns True if the book was available, False (with no state change) otherwise.
        """
        if not self.available:
            logger.debug("Book '%s' is unavailable", self.title)
            return False
        self.available = False
        logger.info("Book '%s' borrowed", self.title)
        return True

    def return_copy(self) -> None:
        """Mark the book as available again. Returning an available book changes nothing."""
        if self.available:
            logger.debug("Book '%s' returned while already available", self.title)
            return
        self.available = True
        logger.info("Book '%s' returned", self.title)


# ---------------- Borrowing policies ----------------
class BorrowingPolicy(ABC):
    """Decides whether a borrower may take a given book."""

    # None means the policy does not cap the number of held books
    limit: Optional[int] = None

    @property
    @abstractmethod
    def kind(self) -> BorrowerKind:
        """Borrower kind this policy applies to."""

    @abstractmethod
    def check(self, borrower: Borrower, book: Book) -> Optional[LendingError]:
        """Return the reason the borrow is refused, or None when it is allowed."""

    def is_eligible(self, borrower: Borrower, book: Book) -> bool:
        return self.check(borrower, book) is None

    def refusal_message(self, error: LendingError, borrower: Borrower, book: Book) -> str:
        return error.message(title=book.title, name=borrower.name, limit=self.limit)


class StudentPolicy(BorrowingPolicy):
    """Students may hold at most `limit` books at a time."""

    kind = BorrowerKind.STUDENT

    def __init__(self, limit: int = STUDENT_BORROW_LIMIT):
        if limit <= 0:
            raise ValueError(f"Borrow limit must be positive, got {limit}")
        self.limit = limit

    def check(self, borrower: Borrower, book: Book) -> Optional[LendingError]:
        # limit is reported even when the book is also unavailable
        if borrower.borrowed_count >= self.limit:
            return LendingError.BORROW_LIMIT_EXCEEDED
        if not book.is_available():
            return LendingError.BOOK_UNAVAILABLE
        return None


class FacultyPolicy(BorrowingPolicy):
    kind = BorrowerKind.FACULTY

    def check(self, borrower: Borrower, book: Book) -> Optional[LendingError]:
        if not book.is_available():
            return LendingError.BOOK_UNAVAILABLE
        return None


# ---------------- Borrower ----------------
@dataclass(eq=False)
class Borrower:
    """
    A library user holding zero or more books.

    Eligibility is delegated to the injected policy; the borrower itself
    enforces that only held books can be returned.
    """
    name: str
    policy: BorrowingPolicy
    held: List[Book] = field(default_factory=list, init=False)

    @classmethod
    def student(cls, name: str, limit: int = STUDENT_BORROW_LIMIT) -> Borrower:
        return cls(name, StudentPolicy(limit))

    @classmethod
    def faculty(cls, name: str) -> Borrower:
        return cls(name, FacultyPolicy())

    @property
    def kind(self) -> BorrowerKind:
        return self.policy.kind

    @property
    def borrowed_count(self) -> int:
        return len(self.held)

    def has_borrowed(self, book: Book) -> bool:
        return any(b is book for b in self.held)

    def borrow_book(self, book: Book) -> Tuple[bool, str]:
        """
        Borrow `book` if the policy allows it.

        Returns (success, message) where message is human-readable.
        """
        error = self.policy.check(self, book)
        if error is not None:
            logger.debug("%s refused '%s': %s", self.name, book.title, error.name)
            return False, self.policy.refusal_message(error, self, book)

        self.held.append(book)
        if not book.borrow():
            # single-threaded model: the policy just saw the book available
            self.held.remove(book)
            return False, LendingError.BOOK_UNAVAILABLE.message(title=book.title)
        logger.info("%s (%s) borrowed '%s'", self.name, self.kind.value, book.title)
        return True, f"{self.name} borrowed '{book.title}'."

    def return_book(self, book: Book) -> Tuple[bool, str]:
        """
        Return a held book to the library.

        A book this borrower does not hold is left untouched and reported.
        """
        if not self.has_borrowed(book):
            logger.debug("%s does not hold '%s'", self.name, book.title)
            return False, LendingError.NOT_BORROWED_BY_USER.message(title=book.title, name=self.name)
        book.return_copy()
        self.held = [b for b in self.held if b is not book]
        logger.info("%s returned '%s'", self.name, book.title)
        return True, f"{self.name} returned '{book.title}'."

    def list_borrowed_books(self) -> List[str]:
        return [b.title for b in self.held]

    def borrowed_books_message(self) -> str:
        titles = self.list_borrowed_books()
        if not titles:
            return f"{self.name} has not borrowed any books."
        return f"Books borrowed by {self.name}: " + ", ".join(titles)


# ---------------- Inventory ----------------
class Inventory:
    """
    Insertion-ordered catalog of books with case-insensitive title lookup.

    Duplicate titles are accepted; lookup always returns the first one added.
    """

    def __init__(self):
        self.books: List[Book] = []

    def __len__(self) -> int:
        return len(self.books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.books)

    def add_book(self, book: Book) -> None:
        self.books.append(book)
        logger.info("Added book '%s'", book.title)

    def find_book_by_title(self, title: str) -> Optional[Book]:
        """
        Find the first book whose title matches `title` ignoring case.

        Returns the Book or None if not found.
        """
        wanted = (title or "").casefold()
        for book in self.books:
            if book.title.casefold() == wanted:
                return book
        logger.warning("%s", LendingError.TITLE_NOT_FOUND.message(title=title))
        return None

    def available_books(self) -> List[Book]:
        return [b for b in self.books if b.available]
