"""Result container pairing parsed data with the model that shaped it."""

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from wiremodel.kernel.schema import Parameter


class ResultModel(Mapping):
    """Read-only mapping over a parse result.

    ``structure`` is the response model the data was produced from, for
    consumers that need to know the declared shape.
    """

    def __init__(self, data: Any, structure: Optional[Parameter] = None):
        self.data = data if data is not None else {}
        self.structure = structure

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def get_path(self, path: str, separator: str = "/") -> Any:
        """Walk nested dicts and lists, e.g. ``"items/0/id"``.

        Returns None as soon as a segment is missing.
        """
        current = self.data
        for segment in path.split(separator):
            if isinstance(current, Mapping):
                if segment not in current:
                    return None
                current = current[segment]
            elif isinstance(current, list):
                try:
                    current = current[int(segment)]
                except (ValueError, IndexError):
                    return None
            else:
                return None
        return current

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResultModel):
            return self.data == other.data and self.structure == other.structure
        return self.data == other

    def __repr__(self) -> str:
        name = self.structure.name if self.structure is not None else None
        return f"ResultModel(structure={name!r}, data={self.data!r})"
