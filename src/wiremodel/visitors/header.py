"""Header location visitor."""

from typing import Any, Dict, List

from wiremodel.kernel.schema import Parameter
from .base import ResponseVisitor


class HeaderVisitor(ResponseVisitor):
    """Reads response headers by wire name.

    An object property whose ``additional_properties`` is a schema collects
    every header starting with its wire name, keyed by the rest of the
    (lowercased) header name. Absent headers are not written.
    """

    def visit(self, command, response, param, result):
        if param.type == "object" and isinstance(param.additional_properties, Parameter):
            self._process_prefixed(response, param, result)
            return

        value = response.headers.get(param.wire_name)
        if value is not None:
            result[param.name] = param.filter(value)

    def _process_prefixed(self, response, param: Parameter, result: Dict[str, Any]) -> None:
        prefix = param.wire_name.lower()
        collected: Dict[str, List[str]] = {}
        for key, value in response.headers.multi_items():
            if key.startswith(prefix):
                collected.setdefault(key[len(prefix):], []).append(value)

        result[param.name] = {
            key: param.additional_properties.filter(values[0] if len(values) == 1 else values)
            for key, values in collected.items()
        }
