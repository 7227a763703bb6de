"""wiremodel: map HTTP responses onto service description models."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("wiremodel")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from wiremodel.codes import Location, ProcessingMode, ResponseKind
from wiremodel.kernel.command import Command
from wiremodel.kernel.description import Operation, ServiceDescription
from wiremodel.kernel.errors import (
    ConfigurationError,
    ResponseDecodeError,
    UnregisteredLocationError,
    UnsupportedModelTypeError,
    WireModelError,
)
from wiremodel.kernel.registry import VisitorRegistry, default_registry
from wiremodel.kernel.schema import Parameter
from wiremodel.model import ResultModel
from wiremodel.parser import DefaultResponseParser, OperationResponseParser
from wiremodel.visitors import ResponseVisitor

__all__ = [
    "__version__",
    "Location",
    "ProcessingMode",
    "ResponseKind",
    "Command",
    "Operation",
    "ServiceDescription",
    "Parameter",
    "ResultModel",
    "ResponseVisitor",
    "VisitorRegistry",
    "default_registry",
    "DefaultResponseParser",
    "OperationResponseParser",
    "WireModelError",
    "ConfigurationError",
    "UnregisteredLocationError",
    "UnsupportedModelTypeError",
    "ResponseDecodeError",
]
