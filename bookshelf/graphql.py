from copy import copy

from graphql import GraphQLError
from graphql.execution import execute as graphql_execute, ExecutionResult
from graphql.language import ast as graphql_ast, parse, print_ast, visit, Visitor
from graphql.validation import validate as graphql_validate
import graphlayer as g
from graphlayer.graphql import parser
from graphlayer.graphql.naming import snake_case_to_camel_case
from graphlayer.graphql.schema import create_graphql_schema


_introspection_field_names = frozenset(["__schema", "__type"])


class Description(object):
    def __init__(self, type, text, fields):
        self.type = type
        self.text = text
        self.fields = fields


def describe(graph_type, text, fields=None):
    if fields is None:
        fields = lambda: {}

    return Description(type=graph_type, text=text, fields=fields)


def executor(*, query_type, mutation_type=None, descriptions=()):
    graphql_schema = create_graphql_schema(query_type=query_type, mutation_type=mutation_type)
    _add_descriptions(graphql_schema.graphql_schema, descriptions)

    def execute(document_text, *, graph, operation_name=None, variables=None, allow_mutations=True):
        try:
            document = parse(document_text)

            validation_errors = graphql_validate(graphql_schema.graphql_schema, document)
            if validation_errors:
                raise validation_errors[0]

            operation = _find_operation(document, operation_name)
            if operation.operation == graphql_ast.OperationType.MUTATION and not allow_mutations:
                raise GraphQLError(
                    "Can only perform a mutation operation from a POST request.",
                    nodes=[operation],
                )

            introspection_selections = []
            graph_selections = []
            for selection in operation.selection_set.selections:
                if _is_introspection_field(selection):
                    introspection_selections.append(selection)
                else:
                    graph_selections.append(selection)

            result = {}

            if graph_selections:
                query = parser.document_text_to_query(
                    document_text=print_ast(_restrict_document(document, operation, graph_selections)),
                    variables=variables,
                    graphql_schema=graphql_schema,
                )
                result.update(graph.resolve(query.graph_query))

            if introspection_selections:
                result.update(_execute_introspection(
                    _restrict_document(document, operation, introspection_selections),
                    graphql_schema=graphql_schema.graphql_schema,
                    variables=variables,
                ))

            return ExecutionResult(data=result, errors=None)
        except GraphQLError as error:
            return ExecutionResult(data=None, errors=[error])
        except g.GraphError as error:
            return ExecutionResult(data=None, errors=[GraphQLError(str(error), original_error=error)])

    return execute


def _add_descriptions(graphql_schema, descriptions):
    for description in descriptions:
        graphql_type = graphql_schema.type_map[description.type.name]
        graphql_type.description = description.text

        for field, text in description.fields().items():
            graphql_type.fields[snake_case_to_camel_case(field.name)].description = text


def _find_operation(document, operation_name):
    operations = [
        definition
        for definition in document.definitions
        if isinstance(definition, graphql_ast.OperationDefinitionNode)
    ]

    if operation_name is None:
        if len(operations) == 1:
            return operations[0]
        else:
            raise GraphQLError("Must provide operation name if query contains multiple operations.")

    for operation in operations:
        if operation.name is not None and operation.name.value == operation_name:
            return operation

    raise GraphQLError("Unknown operation named '{}'.".format(operation_name))


def _is_introspection_field(selection):
    return isinstance(selection, graphql_ast.FieldNode) and selection.name.value in _introspection_field_names


def _restrict_document(document, operation, selections):
    """
    Copy the document down to the given root selections of one operation,
    keeping only the fragments and variable definitions they use.
    """
    selection_set = copy(operation.selection_set)
    selection_set.selections = selections

    fragments = dict(
        (definition.name.value, definition)
        for definition in document.definitions
        if isinstance(definition, graphql_ast.FragmentDefinitionNode)
    )

    references = _References()
    visit(selection_set, references)
    fragment_names = set()
    while references.fragment_names - fragment_names:
        fragment_name = (references.fragment_names - fragment_names).pop()
        fragment_names.add(fragment_name)
        visit(fragments[fragment_name].selection_set, references)

    restricted_operation = copy(operation)
    restricted_operation.selection_set = selection_set
    restricted_operation.variable_definitions = [
        variable_definition
        for variable_definition in (operation.variable_definitions or [])
        if variable_definition.variable.name.value in references.variable_names
    ]

    restricted_document = copy(document)
    restricted_document.definitions = [restricted_operation] + [
        definition
        for definition in document.definitions
        if isinstance(definition, graphql_ast.FragmentDefinitionNode) and definition.name.value in fragment_names
    ]
    return restricted_document


class _References(Visitor):
    def __init__(self):
        super().__init__()
        self.fragment_names = set()
        self.variable_names = set()

    def enter_fragment_spread(self, node, *args):
        self.fragment_names.add(node.name.value)

    def enter_variable(self, node, *args):
        self.variable_names.add(node.name.value)


def _execute_introspection(document, graphql_schema, variables):
    result = graphql_execute(
        graphql_schema,
        document,
        variable_values=variables,
    )
    if result.errors:
        raise result.errors[0]
    else:
        return result.data
