import graphlayer as g

from .. import graphql
from . import authors, books


Query = g.ObjectType(
    "Query",
    fields=lambda: (
        g.field("books", type=g.ListType(books.Book)),
        g.field("book", type=g.NullableType(books.Book), params=(
            g.param("id", type=g.NullableType(g.Int), default=None),
        )),
        g.field("authors", type=g.ListType(authors.Author)),
        g.field("author", type=g.NullableType(authors.Author), params=(
            g.param("id", type=g.NullableType(g.Int), default=None),
        )),
    ),
)


root_resolver = g.root_object_resolver(Query)


@root_resolver.field(Query.fields.books)
def root_resolve_books(graph, query, args):
    return graph.resolve(books.BookQuery.select(query.element_query))


@root_resolver.field(Query.fields.book)
def root_resolve_book(graph, query, args):
    books_by_id = graph.resolve(books.BookQuery.select_by_id(query.element_query, ids=(args.id, )))
    return books_by_id.get(args.id)


@root_resolver.field(Query.fields.authors)
def root_resolve_authors(graph, query, args):
    return graph.resolve(authors.AuthorQuery.select(query.element_query))


@root_resolver.field(Query.fields.author)
def root_resolve_author(graph, query, args):
    authors_by_id = graph.resolve(authors.AuthorQuery.select_by_id(query.element_query, ids=(args.id, )))
    return authors_by_id.get(args.id)


resolvers = (root_resolver, )


descriptions = (
    graphql.describe(
        Query,
        "Root Query",
        fields=lambda: {
            Query.fields.books: "List of Books",
            Query.fields.book: "A single book",
            Query.fields.authors: "List of Authors",
            Query.fields.author: "A single author",
        },
    ),
)
