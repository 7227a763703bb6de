"""Pydantic model for schema nodes (response models and their properties)."""

from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


# Closed set of filters a schema node may name. Non-string values pass
# through the string filters untouched.
FILTERS: Dict[str, Callable[[Any], Any]] = {
    "lower": lambda v: v.lower() if isinstance(v, str) else v,
    "upper": lambda v: v.upper() if isinstance(v, str) else v,
    "strip": lambda v: v.strip() if isinstance(v, str) else v,
    "int": int,
    "float": float,
    "bool": _to_bool,
}


class Parameter(BaseModel):
    """A schema node: one field of a response, or a container of fields.

    ``type`` is the shape tag (``object``, ``array`` or a scalar type name),
    ``location`` names the visitor that extracts the node, and ``sent_as``
    is the key the data carries on the wire when it differs from ``name``.
    """
    name: str = ""
    type: Optional[str] = None
    location: Optional[str] = None
    sent_as: Optional[str] = Field(None, alias="sentAs")
    description: Optional[str] = None
    default: Any = None
    properties: Dict[str, "Parameter"] = Field(
        default_factory=dict,
        description="Child nodes of an object, in declaration order"
    )
    items: Optional["Parameter"] = Field(None, description="Element schema of an array")
    additional_properties: Union[bool, "Parameter"] = Field(True, alias="additionalProperties")
    filters: List[str] = Field(default_factory=list)
    data: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator('properties')
    @classmethod
    def name_properties(cls, v: Dict[str, "Parameter"]) -> Dict[str, "Parameter"]:
        """Properties declared without a name take their key."""
        for key, prop in v.items():
            if not prop.name:
                prop.name = key
        return v

    @field_validator('filters')
    @classmethod
    def validate_filters(cls, v: List[str]) -> List[str]:
        """Only filters from the built-in table are allowed."""
        unknown = [f for f in v if f not in FILTERS]
        if unknown:
            raise ValueError(f"Unknown filters {unknown}; expected any of {sorted(FILTERS)}")
        return v

    @property
    def wire_name(self) -> str:
        """Key of this node in the raw response."""
        return self.sent_as or self.name

    def get_property(self, name: str) -> Optional["Parameter"]:
        """Get child property by name."""
        return self.properties.get(name)

    def located_properties(self) -> List["Parameter"]:
        """Properties that carry a location, in declaration order."""
        return [p for p in self.properties.values() if p.location]

    def renamed(self, name: str) -> "Parameter":
        """Return a copy of this node under a different name.

        The copy is shallow; child nodes are shared with the original and
        the original node itself is never modified.
        """
        return self.model_copy(update={"name": name})

    def filter(self, value: Any) -> Any:
        """Apply this node's filters to a value, in order."""
        for name in self.filters:
            value = FILTERS[name](value)
        return value


Parameter.model_rebuild()
