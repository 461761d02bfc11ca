from .authors import Author
from .books import Book
from .store import Store


def create_store():
    rowling = Author(id=1, name="J. K. Rowling")
    tolkien = Author(id=2, name="J. R. R. Tolkien")
    weeks = Author(id=3, name="Brent Weeks")

    return Store(
        authors=(rowling, tolkien, weeks),
        books=(
            Book(id=1, name="Harry Potter and the Chamber of Secrets", author_id=rowling.id),
            Book(id=2, name="Harry Potter and the Prisoner of Azkaban", author_id=rowling.id),
            Book(id=3, name="Harry Potter and the Goblet of Fire", author_id=rowling.id),
            Book(id=4, name="The Fellowship of the Ring", author_id=tolkien.id),
            Book(id=5, name="The Two Towers", author_id=tolkien.id),
            Book(id=6, name="The Return of the King", author_id=tolkien.id),
            Book(id=7, name="The Way of Shadows", author_id=weeks.id),
            Book(id=8, name="Beyond the Shadows", author_id=weeks.id),
        ),
    )


__all__ = [
    "Author",
    "Book",
    "create_store",
    "Store",
]
