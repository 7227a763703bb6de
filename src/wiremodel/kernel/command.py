"""Command handle passed through the parser to visitors."""

from typing import Any, Dict, Optional

import httpx

from wiremodel.codes import ProcessingMode
from wiremodel.config import Settings, get_settings
from .description import Operation


class Command:
    """An executed operation: its description, options and the response it got.

    ``response`` is whatever the transport produced for this command. Body
    visitors read it in ``before()`` so they can decode the payload once per
    parse.
    """

    RESPONSE_PROCESSING = "command.response_processing"

    def __init__(
        self,
        operation: Operation,
        options: Optional[Dict[str, Any]] = None,
        response: Optional[httpx.Response] = None,
        settings: Optional[Settings] = None,
    ):
        self.operation = operation
        self.options: Dict[str, Any] = dict(options or {})
        self.response = response
        if self.RESPONSE_PROCESSING not in self.options:
            settings = settings or get_settings()
            self.options[self.RESPONSE_PROCESSING] = settings.DEFAULT_RESPONSE_PROCESSING

    def get(self, key: str, default: Any = None) -> Any:
        return self.options.get(key, default)

    def set(self, key: str, value: Any) -> "Command":
        self.options[key] = value
        return self

    def processing_mode(self) -> str:
        """Processing mode requested through ``RESPONSE_PROCESSING``."""
        mode = self.options[self.RESPONSE_PROCESSING]
        return mode.value if isinstance(mode, ProcessingMode) else str(mode)

    def __repr__(self) -> str:
        return f"Command(operation={self.operation.name!r}, mode={self.processing_mode()!r})"
