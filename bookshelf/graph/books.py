import graphlayer as g

from .. import database, graphql
from . import authors


Book = g.ObjectType("Book", fields=lambda: (
    g.field("id", type=g.Int),
    g.field("name", type=g.String),
    g.field("author_id", type=g.Int),
    g.field("author", type=g.NullableType(authors.Author)),
))


class BookQuery(object):
    @staticmethod
    def select(object_query):
        return BookQuery(object_query=object_query, by_ids=None, by_author_ids=None)

    @staticmethod
    def select_by_id(object_query, ids):
        return BookQuery(object_query=object_query, by_ids=ids, by_author_ids=None)

    @staticmethod
    def select_by_author_id(object_query, author_ids):
        return BookQuery(object_query=object_query, by_ids=None, by_author_ids=author_ids)

    def __init__(self, object_query, by_ids, by_author_ids):
        self.type = BookQuery
        self.object_query = object_query
        self.by_ids = by_ids
        self.by_author_ids = by_author_ids


@g.resolver(BookQuery)
@g.dependencies(store=database.Store)
def book_resolver(graph, query, *, store):
    if query.by_ids is not None:
        records = store.books_by_id(query.by_ids)
    elif query.by_author_ids is not None:
        records = store.books_by_author_id(query.by_author_ids)
    else:
        records = store.books()

    build_book = g.create_object_builder(query.object_query)

    @build_book.getter(Book.fields.id)
    def field_id(book):
        return book.id

    @build_book.getter(Book.fields.name)
    def field_name(book):
        return book.name

    @build_book.getter(Book.fields.author_id)
    def field_author_id(book):
        return book.author_id

    @build_book.field(Book.fields.author)
    def field_author(field_query):
        authors_by_id = graph.resolve(authors.AuthorQuery.select_by_id(
            field_query.type_query.element_query,
            ids=frozenset(book.author_id for book in records),
        ))
        return lambda book: authors_by_id.get(book.author_id)

    if query.by_ids is not None:
        return dict(
            (book.id, build_book(book))
            for book in records
        )
    elif query.by_author_ids is not None:
        books_by_author_id = {}
        for book in records:
            books_by_author_id.setdefault(book.author_id, []).append(build_book(book))
        return books_by_author_id
    else:
        return [build_book(book) for book in records]


resolvers = (
    book_resolver,
)


descriptions = (
    graphql.describe(
        Book,
        "This represents a book written by an author",
        fields=lambda: {
            Book.fields.author_id: "The id of the author who wrote this book",
            Book.fields.author: "The author who wrote this book, if they are known",
        },
    ),
)
