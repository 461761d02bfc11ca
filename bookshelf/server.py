import json
import logging
import os

import flask
from graphql.error import format_error
import werkzeug.serving

from . import database
from .graph import execute


HOST = "0.0.0.0"
PORT = 5000
GRAPHQL_PATH = "/graphql"


_logger = logging.getLogger(__name__)


def local_path(path):
    return os.path.join(os.path.dirname(__file__), path)


def create_app(store=None):
    if store is None:
        store = database.create_store()

    app = flask.Flask(__name__)

    @app.route(GRAPHQL_PATH, methods=["GET"])
    def graphql_get():
        if "query" not in flask.request.args:
            with open(local_path("graphiql/index.html"), encoding="utf-8") as fileobj:
                return fileobj.read()

        try:
            variables = json.loads(flask.request.args.get("variables") or "{}")
        except ValueError:
            _logger.warning("rejected GraphQL request with malformed variables")
            return _bad_request("variables must be a JSON object")

        return _execute_request(
            store,
            document_text=flask.request.args["query"],
            operation_name=flask.request.args.get("operationName") or None,
            variables=variables,
            allow_mutations=False,
        )

    @app.route(GRAPHQL_PATH, methods=["POST"])
    def graphql_post():
        request = flask.request.get_json(silent=True)
        if not isinstance(request, dict) or not isinstance(request.get("query"), str):
            _logger.warning("rejected GraphQL request without a query")
            return _bad_request("request body must be a JSON object with a query")

        return _execute_request(
            store,
            document_text=request["query"],
            operation_name=request.get("operationName") or None,
            variables=request.get("variables") or {},
            allow_mutations=True,
        )

    return app


def _execute_request(store, *, document_text, operation_name, variables, allow_mutations):
    if not isinstance(variables, dict):
        _logger.warning("rejected GraphQL request with non-object variables")
        return _bad_request("variables must be a JSON object")

    if operation_name is not None and not isinstance(operation_name, str):
        _logger.warning("rejected GraphQL request with non-string operation name")
        return _bad_request("operationName must be a string")

    _logger.debug("executing GraphQL document: %s", document_text)
    result = execute(
        document_text,
        store=store,
        operation_name=operation_name,
        variables=variables,
        allow_mutations=allow_mutations,
    )

    response = {"data": result.data}
    if result.errors:
        response["errors"] = [_format_error(error) for error in result.errors]

    return flask.jsonify(response)


def _format_error(error):
    formatted = format_error(error)
    if formatted.get("locations") is not None:
        formatted["locations"] = [
            _format_location(location)
            for location in formatted["locations"]
        ]
    return formatted


def _format_location(location):
    if isinstance(location, dict):
        return location
    else:
        return {"line": location.line, "column": location.column}


def _bad_request(message):
    return flask.jsonify({"errors": [{"message": message}]}), 400


def main(host=HOST, port=PORT):
    logging.basicConfig(level=logging.INFO)

    server = werkzeug.serving.make_server(host, port, create_app(), threaded=True)
    _logger.info("Server Running on port %s", server.port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
