"""XML body location visitor."""

from typing import Any, Dict

from wiremodel.kernel.schema import Parameter
from wiremodel.kernel.xml_utils import ATTRIBUTES_KEY, TEXT_KEY, parse_xml
from .structured import _MISSING, StructuredBodyVisitor


class XmlVisitor(StructuredBodyVisitor):
    """Maps properties out of an XML document.

    On top of the JSON rules, XML needs a few corrections because a tree
    does not say whether a node is a collection:
    - ``data["xmlAttribute"]`` reads the property from the element's attributes
    - A single node where an array is expected becomes a one-item list
    - A collection wrapping its items (``<Items><Item/><Item/></Items>``) is
      unwrapped using the item schema's wire name
    """

    def decode(self, response):
        if not response.content:
            return None
        content_type = response.headers.get("content-type", "application/xml")
        return parse_xml(response.content, content_type)

    def take(self, param: Parameter, container: Dict[str, Any]) -> Any:
        if not param.data.get("xmlAttribute"):
            return super().take(param, container)

        attributes = container.get(ATTRIBUTES_KEY)
        if not isinstance(attributes, dict) or param.wire_name not in attributes:
            return _MISSING
        value = attributes.pop(param.wire_name)
        if not attributes:
            del container[ATTRIBUTES_KEY]
        return value

    def process(self, param: Parameter, value: Any) -> Any:
        if value is None:
            return None
        if param.type == "array":
            value = self._as_list(param, value)
            if param.items is not None:
                value = [self.process(param.items, item) for item in value]
        elif param.type == "object" and isinstance(value, dict):
            value = self.process_object(param, value)
        elif param.type == "string" and isinstance(value, dict):
            # Attributes are dropped; the text, if any, is the string value
            value = value.get(TEXT_KEY, "")
        return param.filter(value)

    def _as_list(self, param: Parameter, value: Any) -> list:
        if isinstance(value, list):
            return value
        if isinstance(value, dict):
            items = param.items
            if items is not None and items.wire_name in value:
                wrapped = value[items.wire_name]
                return wrapped if isinstance(wrapped, list) else [wrapped]
            return [value] if value else []
        return [value] if value != "" else []
