"""Visitors for the status line of a response."""

from .base import ResponseVisitor


class StatusCodeVisitor(ResponseVisitor):
    """Stores the HTTP status code."""

    def visit(self, command, response, param, result):
        result[param.name] = param.filter(response.status_code)


class ReasonPhraseVisitor(ResponseVisitor):
    """Stores the reason phrase of the status line."""

    def visit(self, command, response, param, result):
        result[param.name] = param.filter(response.reason_phrase)
