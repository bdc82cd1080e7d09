from typing import Any, Dict, Iterator, Optional

from apidoc.extracting.domain.errors import UnknownTypeError


def default_type_id(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class TypeRegistry:
    """
    Maps type identifiers used in annotations to Python classes.
    Populated once at startup; models and resources share one registry.
    """

    def __init__(self):
        self._types: Dict[str, Any] = {}

    def register(self, cls: Any, type_id: Optional[str] = None) -> Any:
        key = type_id or default_type_id(cls)
        if key in self._types and self._types[key] is not cls:
            raise ValueError(f"Type identifier {key!r} is already bound to {self._types[key]!r}")
        self._types[key] = cls
        return cls

    def alias(self, type_id: str, cls: Any) -> None:
        self.register(cls, type_id)

    def resolve(self, type_id: str) -> Any:
        try:
            return self._types[type_id]
        except KeyError:
            raise UnknownTypeError(type_id)

    def __contains__(self, type_id: str) -> bool:
        return type_id in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)
