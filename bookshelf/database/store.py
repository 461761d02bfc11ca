import itertools
import threading

from .authors import Author
from .books import Book


class Store(object):
    """
    Holds the authors and books of one process.

    Records are only ever appended. Ids are drawn from a counter per
    collection rather than from the collection length, and both the
    collections and the counters are guarded by a single lock.
    """

    def __init__(self, authors=(), books=()):
        self._lock = threading.Lock()
        self._authors = list(authors)
        self._books = list(books)
        self._author_ids = itertools.count(_next_id(self._authors))
        self._book_ids = itertools.count(_next_id(self._books))

    def authors(self):
        with self._lock:
            return tuple(self._authors)

    def books(self):
        with self._lock:
            return tuple(self._books)

    def authors_by_id(self, ids):
        ids = frozenset(ids)
        return tuple(
            author
            for author in self.authors()
            if author.id in ids
        )

    def books_by_id(self, ids):
        ids = frozenset(ids)
        return tuple(
            book
            for book in self.books()
            if book.id in ids
        )

    def books_by_author_id(self, author_ids):
        author_ids = frozenset(author_ids)
        return tuple(
            book
            for book in self.books()
            if book.author_id in author_ids
        )

    def add_author(self, name):
        with self._lock:
            author = Author(id=next(self._author_ids), name=name)
            self._authors.append(author)
            return author

    def add_book(self, name, author_id):
        # author_id is not checked against the authors
        with self._lock:
            book = Book(id=next(self._book_ids), name=name, author_id=author_id)
            self._books.append(book)
            return book


def _next_id(records):
    return max((record.id for record in records), default=0) + 1
