import graphlayer as g

from .. import database, graphql
from . import authors, books, mutations, root


resolvers = (
    authors.resolvers,
    books.resolvers,
    mutations.resolvers,
    root.resolvers,
)


descriptions = (
    authors.descriptions
    + books.descriptions
    + mutations.descriptions
    + root.descriptions
)


_graph_definition = g.define_graph(resolvers=resolvers)


def create_graph(*, store):
    return _graph_definition.create_graph(
        {
            database.Store: store,
        }
    )


Query = root.Query
Mutation = mutations.Mutation

_execute = graphql.executor(
    query_type=Query,
    mutation_type=Mutation,
    descriptions=descriptions,
)


def execute(document_text, *, store, operation_name=None, variables=None, allow_mutations=True):
    return _execute(
        document_text,
        graph=create_graph(store=store),
        operation_name=operation_name,
        variables=variables,
        allow_mutations=allow_mutations,
    )
