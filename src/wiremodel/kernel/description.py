"""Service description: operations and the response models they reference."""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from wiremodel.codes import ResponseKind
from .schema import Parameter

# responseClass values that name a primitive rather than a model or class
PRIMITIVE_TYPES = frozenset({"array", "boolean", "string", "integer", "number", ""})


class Operation(BaseModel):
    """An API operation and the kind of response it produces."""
    name: str = ""
    response_class: str = Field("array", alias="responseClass")
    response_type: Optional[ResponseKind] = Field(None, alias="responseType")
    summary: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    _description: Any = PrivateAttr(default=None)

    @property
    def service_description(self) -> Optional["ServiceDescription"]:
        return self._description

    def bind(self, description: "ServiceDescription") -> "Operation":
        """Attach this operation to the description that owns it."""
        self._description = description
        return self

    def response_kind(self) -> ResponseKind:
        """Declared response kind, inferred from ``response_class`` when unset.

        Inference order: primitive type names, then models known to the
        owning description, then anything else is a class name.
        """
        if self.response_type is not None:
            return self.response_type
        if self.response_class in PRIMITIVE_TYPES:
            return ResponseKind.PRIMITIVE
        if self._description is not None and self._description.has_model(self.response_class):
            return ResponseKind.MODEL
        return ResponseKind.CLASS

    def response_schema_name(self) -> str:
        return self.response_class


class ServiceDescription(BaseModel):
    """A collection of operations and named response models."""
    name: str = ""
    operations: Dict[str, Operation] = Field(default_factory=dict)
    models: Dict[str, Parameter] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode='after')
    def link_members(self):
        """Name members after their keys and bind operations to this description."""
        for key, model in self.models.items():
            if not model.name:
                model.name = key
        for key, operation in self.operations.items():
            if not operation.name:
                operation.name = key
            operation.bind(self)
        return self

    def get_model(self, name: str) -> Optional[Parameter]:
        """Get a response model by name, or None if it is not defined."""
        return self.models.get(name)

    def has_model(self, name: str) -> bool:
        return name in self.models

    def get_operation(self, name: str) -> Optional[Operation]:
        """Get an operation by name, or None if it is not defined."""
        return self.operations.get(name)

    @classmethod
    def from_json_bytes(cls, data: bytes) -> "ServiceDescription":
        """Load a service description from JSON bytes (pure, no I/O)."""
        payload: Dict[str, Any] = json.loads(data)
        return cls(**payload)
