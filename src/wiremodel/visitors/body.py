"""Raw body location visitor."""

from .base import ResponseVisitor


class BodyVisitor(ResponseVisitor):
    """Stores the undecoded response body (bytes)."""

    def visit(self, command, response, param, result):
        result[param.name] = param.filter(response.content)
