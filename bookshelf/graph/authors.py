import graphlayer as g

from .. import database, graphql
from . import books


Author = g.ObjectType("Author", fields=lambda: (
    g.field("id", type=g.Int),
    g.field("name", type=g.String),
    g.field("books", type=g.ListType(books.Book)),
))


class AuthorQuery(object):
    @staticmethod
    def select(object_query):
        return AuthorQuery(object_query=object_query, by_ids=None)

    @staticmethod
    def select_by_id(object_query, ids):
        return AuthorQuery(object_query=object_query, by_ids=ids)

    def __init__(self, object_query, by_ids):
        self.type = AuthorQuery
        self.object_query = object_query
        self.by_ids = by_ids


@g.resolver(AuthorQuery)
@g.dependencies(store=database.Store)
def author_resolver(graph, query, *, store):
    if query.by_ids is None:
        records = store.authors()
    else:
        records = store.authors_by_id(query.by_ids)

    build_author = g.create_object_builder(query.object_query)

    @build_author.getter(Author.fields.id)
    def field_id(author):
        return author.id

    @build_author.getter(Author.fields.name)
    def field_name(author):
        return author.name

    @build_author.field(Author.fields.books)
    def field_books(field_query):
        books_by_author_id = graph.resolve(books.BookQuery.select_by_author_id(
            field_query.type_query.element_query,
            author_ids=frozenset(author.id for author in records),
        ))
        return lambda author: books_by_author_id.get(author.id, [])

    if query.by_ids is None:
        return [build_author(author) for author in records]
    else:
        return dict(
            (author.id, build_author(author))
            for author in records
        )


resolvers = (
    author_resolver,
)


descriptions = (
    graphql.describe(
        Author,
        "This represents an author of a book",
        fields=lambda: {
            Author.fields.books: "The books written by this author",
        },
    ),
)
