"""Response visitor interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict

import httpx

from wiremodel.kernel.command import Command
from wiremodel.kernel.schema import Parameter


class ResponseVisitor(ABC):
    """Extracts the data of one response location into a result dict.

    A single instance serves every property bound to its location, and may
    serve several parses at once when it comes from a shared registry.
    Anything a visitor needs between ``before()`` and ``after()`` must live
    in ``result`` or on the command, never on the visitor.
    """

    def before(self, command: Command, result: Dict[str, Any]) -> None:
        """Called once per parse before the first ``visit()`` for this location."""

    @abstractmethod
    def visit(
        self,
        command: Command,
        response: httpx.Response,
        param: Parameter,
        result: Dict[str, Any],
    ) -> None:
        """Write the value described by ``param`` into ``result``."""
        ...

    def after(self, command: Command) -> None:
        """Called once per parse after the last ``visit()`` for this location."""
