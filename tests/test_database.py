from precisely import assert_that, contains_exactly, has_attrs, is_sequence

from bookshelf import database


def test_store_is_seeded_with_authors_in_order():
    store = database.create_store()

    assert_that(store.authors(), is_sequence(
        has_attrs(id=1, name="J. K. Rowling"),
        has_attrs(id=2, name="J. R. R. Tolkien"),
        has_attrs(id=3, name="Brent Weeks"),
    ))


def test_store_is_seeded_with_books_in_order():
    store = database.create_store()

    assert_that(store.books(), is_sequence(
        has_attrs(id=1, name="Harry Potter and the Chamber of Secrets", author_id=1),
        has_attrs(id=2, name="Harry Potter and the Prisoner of Azkaban", author_id=1),
        has_attrs(id=3, name="Harry Potter and the Goblet of Fire", author_id=1),
        has_attrs(id=4, name="The Fellowship of the Ring", author_id=2),
        has_attrs(id=5, name="The Two Towers", author_id=2),
        has_attrs(id=6, name="The Return of the King", author_id=2),
        has_attrs(id=7, name="The Way of Shadows", author_id=3),
        has_attrs(id=8, name="Beyond the Shadows", author_id=3),
    ))


def test_books_can_be_found_by_author_id():
    store = database.create_store()

    assert_that(store.books_by_author_id([3]), is_sequence(
        has_attrs(name="The Way of Shadows"),
        has_attrs(name="Beyond the Shadows"),
    ))


def test_records_can_be_found_by_id():
    store = database.create_store()

    assert_that(store.authors_by_id([2, 99]), contains_exactly(has_attrs(name="J. R. R. Tolkien")))
    assert_that(store.books_by_id([5]), contains_exactly(has_attrs(name="The Two Towers")))


def test_added_author_gets_next_id_and_is_appended():
    store = database.create_store()

    author = store.add_author(name="New Author")

    assert_that(author, has_attrs(id=4, name="New Author"))
    assert_that(store.authors()[-1], has_attrs(id=4, name="New Author"))


def test_successive_adds_get_distinct_increasing_ids():
    store = database.create_store()

    first = store.add_author(name="First")
    second = store.add_author(name="Second")

    assert first.id == 4
    assert second.id == 5


def test_book_can_be_added_for_missing_author():
    store = database.create_store()

    book = store.add_book(name="New Book", author_id=999)

    assert_that(book, has_attrs(id=9, name="New Book", author_id=999))
    assert_that(store.books()[-1], has_attrs(id=9))


def test_ids_continue_from_largest_existing_id():
    store = database.Store(
        authors=(database.Author(id=7, name="Seventh"), ),
    )

    assert_that(store.add_author(name="Next"), has_attrs(id=8))
    assert_that(store.add_book(name="First", author_id=7), has_attrs(id=1))


def test_snapshots_are_not_affected_by_later_adds():
    store = database.create_store()
    books = store.books()

    store.add_book(name="New Book", author_id=1)

    assert len(books) == 8
    assert len(store.books()) == 9


def test_separate_stores_do_not_share_records():
    store = database.create_store()
    store.add_book(name="New Book", author_id=1)

    assert len(database.create_store().books()) == 8
