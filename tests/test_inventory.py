from library_lending import Book, Inventory, LendingError


def test_add_and_len(inventory):
    assert len(inventory) == 3
    assert [b.title for b in inventory] == ["1984", "To Kill a Mockingbird", "Don Quixote"]


def test_lookup_is_case_insensitive(inventory):
    book = inventory.find_book_by_title("1984")
    assert book is not None
    assert inventory.find_book_by_title("don quixote") is inventory.find_book_by_title("DON QUIXOTE")
    assert inventory.find_book_by_title("To Kill A Mockingbird").title == "To Kill a Mockingbird"


def test_lookup_miss_returns_none(inventory, caplog):
    with caplog.at_level("WARNING", logger="LibraryLending"):
        assert inventory.find_book_by_title("Moby Dick") is None
    assert "Moby Dick" in caplog.text


def test_duplicate_titles_return_first_added():
    inv = Inventory()
    first, second = Book("Dune"), Book("dune")
    inv.add_book(first)
    inv.add_book(second)
    assert len(inv) == 2
    assert inv.find_book_by_title("DUNE") is first


def test_available_books(inventory, student):
    student.borrow_book(inventory.find_book_by_title("1984"))
    assert [b.title for b in inventory.available_books()] == ["To Kill a Mockingbird", "Don Quixote"]


def test_lookup_upper_cased_non_ascii_title():
    inv = Inventory()
    book = Book("Straße")
    inv.add_book(book)
    assert inv.find_book_by_title("Straße".upper()) is book
    assert inv.find_book_by_title("STRASSE") is book


def test_lookup_miss_logs_not_found_message(inventory, caplog):
    with caplog.at_level("WARNING", logger="LibraryLending"):
        inventory.find_book_by_title("Moby Dick")
    assert LendingError.TITLE_NOT_FOUND.message(title="Moby Dick") in caplog.text
