import graphlayer as g

from .. import database, graphql
from . import authors, books


Mutation = g.ObjectType(
    "Mutation",
    fields=lambda: (
        g.field("add_book", type=books.Book, params=(
            g.param("name", type=g.String),
            g.param("author_id", type=g.Int),
        )),
        g.field("add_author", type=authors.Author, params=(
            g.param("name", type=g.String),
        )),
    ),
)


mutation_resolver = g.root_object_resolver(Mutation)


@mutation_resolver.field(Mutation.fields.add_book)
@g.dependencies(store=database.Store)
def mutation_add_book(graph, query, args, *, store):
    book = store.add_book(name=args.name, author_id=args.author_id)
    return graph.resolve(books.BookQuery.select_by_id(query, ids=(book.id, )))[book.id]


@mutation_resolver.field(Mutation.fields.add_author)
@g.dependencies(store=database.Store)
def mutation_add_author(graph, query, args, *, store):
    author = store.add_author(name=args.name)
    return graph.resolve(authors.AuthorQuery.select_by_id(query, ids=(author.id, )))[author.id]


resolvers = (mutation_resolver, )


descriptions = (
    graphql.describe(
        Mutation,
        "Root Mutation",
        fields=lambda: {
            Mutation.fields.add_book: "add a book",
            Mutation.fields.add_author: "add an Author",
        },
    ),
)
