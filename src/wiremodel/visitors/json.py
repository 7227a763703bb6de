"""JSON body location visitor."""

from .structured import StructuredBodyVisitor


class JsonVisitor(StructuredBodyVisitor):
    """Maps properties out of a JSON document.

    Decoding errors from httpx propagate as raised.
    """

    def decode(self, response):
        if not response.content:
            return None
        return response.json()
