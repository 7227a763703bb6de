"""Enumerated constants shared across wiremodel.

These constants prevent stringly-typed locations and modes. Every enum is a
``str`` subclass, so a member and its plain string value are interchangeable
as registry keys and option values.
"""

from enum import Enum


class ResponseKind(str, Enum):
    """What an operation declares it returns."""

    PRIMITIVE = "primitive"
    CLASS = "class"
    DOCUMENTATION = "documentation"
    MODEL = "model"


class ProcessingMode(str, Enum):
    """How a command wants its response processed."""

    RAW = "raw"
    MODEL = "model"


class Location(str, Enum):
    """Built-in response locations, one per bundled visitor."""

    STATUS_CODE = "statusCode"
    REASON_PHRASE = "reasonPhrase"
    HEADER = "header"
    BODY = "body"
    JSON = "json"
    XML = "xml"
