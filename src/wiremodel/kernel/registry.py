"""Visitor registry: maps response locations to visitor instances."""

import logging
import threading
from typing import Callable, Dict, List, Optional

from wiremodel.codes import Location
from wiremodel.visitors import (
    BodyVisitor,
    HeaderVisitor,
    JsonVisitor,
    ReasonPhraseVisitor,
    ResponseVisitor,
    StatusCodeVisitor,
    XmlVisitor,
)
from .errors import UnregisteredLocationError

logger = logging.getLogger(__name__)

VisitorFactory = Callable[[], ResponseVisitor]

BUILTIN_VISITORS: Dict[str, VisitorFactory] = {
    Location.STATUS_CODE.value: StatusCodeVisitor,
    Location.REASON_PHRASE.value: ReasonPhraseVisitor,
    Location.HEADER.value: HeaderVisitor,
    Location.BODY.value: BodyVisitor,
    Location.JSON.value: JsonVisitor,
    Location.XML.value: XmlVisitor,
}


def _key(location: str) -> str:
    return location.value if isinstance(location, Location) else location


class VisitorRegistry:
    """Location -> visitor lookup.

    Visitors are either registered as instances or as factories. A factory
    is called on the first ``resolve()`` of its location and the instance is
    cached, so a location always resolves to the same visitor for the
    lifetime of the registry.
    """

    def __init__(self, factories: Optional[Dict[str, VisitorFactory]] = None):
        self._visitors: Dict[str, ResponseVisitor] = {}
        self._factories: Dict[str, VisitorFactory] = {
            _key(k): v for k, v in (factories or {}).items()
        }
        self._lock = threading.Lock()

    @classmethod
    def with_defaults(cls) -> "VisitorRegistry":
        """Create a registry that knows every built-in location."""
        return cls(factories=BUILTIN_VISITORS)

    def register(self, location: str, visitor: ResponseVisitor) -> "VisitorRegistry":
        """Associate a visitor with a location (last write wins)."""
        key = _key(location)
        with self._lock:
            if key in self._visitors:
                logger.warning("Replacing response visitor for location '%s'", key)
            self._visitors[key] = visitor
            self._factories.pop(key, None)
        return self

    def register_factory(self, location: str, factory: VisitorFactory) -> "VisitorRegistry":
        """Associate a lazily-built visitor with a location (last write wins)."""
        key = _key(location)
        with self._lock:
            if self._visitors.pop(key, None) is not None:
                logger.warning("Replacing response visitor for location '%s'", key)
            self._factories[key] = factory
        return self

    def resolve(self, location: str) -> ResponseVisitor:
        """Get the visitor for a location.

        Raises:
            UnregisteredLocationError: If nothing is registered for the location
        """
        key = _key(location)
        with self._lock:
            visitor = self._visitors.get(key)
            if visitor is None:
                factory = self._factories.get(key)
                if factory is None:
                    raise UnregisteredLocationError(key)
                visitor = factory()
                self._visitors[key] = visitor
                logger.debug("Instantiated %s for location '%s'", type(visitor).__name__, key)
        return visitor

    def has(self, location: str) -> bool:
        """Check if a visitor is registered for a location."""
        key = _key(location)
        with self._lock:
            return key in self._visitors or key in self._factories

    def locations(self) -> List[str]:
        """Sorted list of registered locations."""
        with self._lock:
            return sorted(set(self._visitors) | set(self._factories))


_default_registry: Optional[VisitorRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> VisitorRegistry:
    """Process-wide registry with the built-in visitors, built on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = VisitorRegistry.with_defaults()
    return _default_registry
