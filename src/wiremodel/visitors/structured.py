"""Shared machinery for visitors that decode the whole body once per parse."""

from abc import abstractmethod
from typing import Any, Dict, Tuple

import httpx

from wiremodel.kernel.schema import Parameter
from .base import ResponseVisitor

_MISSING = object()


class StructuredBodyVisitor(ResponseVisitor):
    """Seeds the result with the decoded body, then renames and shapes it.

    ``before()`` merges the decoded document into the result. Each
    ``visit()`` moves the value found under the property's wire name to its
    declared name, recursively doing the same for nested properties and
    array items.
    """

    @abstractmethod
    def decode(self, response: httpx.Response) -> Any:
        """Decode the body, returning None for an empty body."""
        ...

    def before(self, command, result):
        if command.response is None:
            return
        document = self.decode(command.response)
        if isinstance(document, dict):
            result.update(document)

    def visit(self, command, response, param, result):
        value = self.take(param, result)

        if param.type == "array" and not isinstance(value, list):
            # Array models: the document itself is the list
            document = self.decode(response)
            if isinstance(document, list):
                value = document

        if value is not _MISSING:
            result[param.name] = self.process(param, value)

    def take(self, param: Parameter, container: Dict[str, Any]) -> Any:
        """Remove and return the raw value of ``param`` from ``container``."""
        return container.pop(param.wire_name, _MISSING)

    def process(self, param: Parameter, value: Any) -> Any:
        """Shape a raw value according to ``param``."""
        if value is None:
            return None
        if param.type == "array" and isinstance(value, list) and param.items is not None:
            value = [self.process(param.items, item) for item in value]
        elif param.type == "object" and isinstance(value, dict):
            value = self.process_object(param, value)
        return param.filter(value)

    def process_object(self, param: Parameter, value: Dict[str, Any]) -> Dict[str, Any]:
        processed, known = self._rename_properties(param, dict(value))

        if param.additional_properties is False:
            # Drop anything the schema does not declare
            processed = {k: v for k, v in processed.items() if k in known}
        elif isinstance(param.additional_properties, Parameter):
            for key in list(processed):
                if key not in known:
                    processed[key] = self.process(param.additional_properties, processed[key])

        return processed

    def _rename_properties(self, param: Parameter, value: Dict[str, Any]) -> Tuple[Dict[str, Any], set]:
        known = set()
        for prop in param.properties.values():
            known.add(prop.name)
            raw = self.take(prop, value)
            if raw is not _MISSING:
                value[prop.name] = self.process(prop, raw)
        return value, known
