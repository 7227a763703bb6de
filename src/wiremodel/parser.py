"""Response parsers.

``DefaultResponseParser`` decodes bodies by content type and knows nothing
about models. ``OperationResponseParser`` maps responses onto the model an
operation declares, routing every property to the visitor registered for its
location, and falls back to the default parser when no model applies.
"""

import logging
from typing import Any, Callable, Dict, Optional, Union

import httpx

from wiremodel.codes import ProcessingMode, ResponseKind
from wiremodel.kernel.command import Command
from wiremodel.kernel.errors import UnsupportedModelTypeError
from wiremodel.kernel.registry import VisitorRegistry
from wiremodel.kernel.schema import Parameter
from wiremodel.kernel.xml_utils import parse_xml
from wiremodel.model import ResultModel
from wiremodel.visitors.base import ResponseVisitor

logger = logging.getLogger(__name__)

ARRAY_ITEMS_KEY = "items"


def _is_json(content_type: str) -> bool:
    return content_type == "application/json" or content_type.endswith("+json")


def _is_xml(content_type: str) -> bool:
    return content_type in ("application/xml", "text/xml") or content_type.endswith("+xml")


class DefaultResponseParser:
    """Schema-agnostic parser: JSON and XML bodies become dicts.

    Any other content type returns the response itself.
    """

    def parse(
        self,
        command: Command,
        response: httpx.Response,
        content_type: Optional[str] = None,
    ) -> Any:
        if content_type is None:
            content_type = response.headers.get("content-type", "")
        media_type = content_type.split(";", 1)[0].strip().lower()

        if _is_json(media_type):
            return response.json()
        if _is_xml(media_type):
            return parse_xml(response.content, media_type)
        return response


class OperationResponseParser:
    """Marshals responses into dicts shaped by service description models."""

    def __init__(
        self,
        registry: VisitorRegistry,
        fallback: Optional[DefaultResponseParser] = None,
    ):
        self.registry = registry
        self.fallback = fallback or DefaultResponseParser()
        self._mappers: Dict[str, Callable[[Parameter, Command, httpx.Response], Any]] = {
            "object": self._parse_object,
            "array": self._parse_array,
        }

    @classmethod
    def default(cls) -> "OperationResponseParser":
        """Parser over the process-wide registry of built-in visitors."""
        from wiremodel.kernel.registry import default_registry
        return cls(default_registry())

    def add_visitor(self, location: str, visitor: ResponseVisitor) -> "OperationResponseParser":
        """Register a location visitor on this parser's registry."""
        self.registry.register(location, visitor)
        return self

    def parse(
        self,
        command: Command,
        response: httpx.Response,
        content_type: Optional[str] = None,
    ) -> Union[ResultModel, Any]:
        """Parse a response for a command.

        Returns:
            The fallback result as-is when the operation has no model,
            otherwise a ResultModel (visited only in ``model`` processing mode)
        """
        operation = command.operation
        model = None
        if operation.response_kind() == ResponseKind.MODEL and operation.service_description is not None:
            model = operation.service_description.get_model(operation.response_schema_name())

        if model is None:
            logger.debug("No response model for %s; using fallback parser", operation.name)
            return self.fallback.parse(command, response, content_type)

        if command.processing_mode() != ProcessingMode.MODEL.value:
            logger.debug("Processing mode of %s is %s; skipping visitors", operation.name, command.processing_mode())
            return ResultModel(self.fallback.parse(command, response, content_type), model)

        command.response = response
        return ResultModel(self.visit_result(model, command, response), model)

    def visit_result(self, model: Parameter, command: Command, response: httpx.Response) -> Any:
        """Dispatch on the model's type tag.

        Raises:
            UnsupportedModelTypeError: If the model is neither an object nor an array
        """
        mapper = self._mappers.get(model.type)
        if mapper is None:
            raise UnsupportedModelTypeError(model.type)
        return mapper(model, command, response)

    def _parse_object(self, model: Parameter, command: Command, response: httpx.Response) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        found: Dict[str, ResponseVisitor] = {}
        props = model.located_properties()

        # before() once per location, in first-seen order
        for prop in props:
            if prop.location not in found:
                found[prop.location] = self.registry.resolve(prop.location)
                found[prop.location].before(command, result)

        for prop in props:
            found[prop.location].visit(command, response, prop, result)

        for visitor in found.values():
            visitor.after(command)

        logger.debug("Mapped %s using locations %s", model.name, list(found))
        return result

    def _parse_array(self, model: Parameter, command: Command, response: httpx.Response) -> Any:
        visitor = self.registry.resolve(model.location)
        result: Dict[str, Any] = {}
        visitor.before(command, result)
        wrapped = {ARRAY_ITEMS_KEY: result}
        # Visit a private copy so the shared model keeps its name
        visitor.visit(command, response, model.renamed(ARRAY_ITEMS_KEY), wrapped)
        visitor.after(command)
        return wrapped[ARRAY_ITEMS_KEY]
