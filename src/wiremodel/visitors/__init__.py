"""Response location visitors bundled with wiremodel."""

from .base import ResponseVisitor
from .body import BodyVisitor
from .header import HeaderVisitor
from .json import JsonVisitor
from .status import ReasonPhraseVisitor, StatusCodeVisitor
from .structured import StructuredBodyVisitor
from .xml import XmlVisitor

__all__ = [
    "ResponseVisitor",
    "StructuredBodyVisitor",
    "StatusCodeVisitor",
    "ReasonPhraseVisitor",
    "HeaderVisitor",
    "BodyVisitor",
    "JsonVisitor",
    "XmlVisitor",
]
