from dataclasses import dataclass
from typing import Any, Callable, Tuple


@dataclass(frozen=True)
class RouteOperation:
    """
    The documented operation: HTTP methods, path template and the handler
    whose docstring carries the tags.
    """
    methods: Tuple[str, ...]
    path: str
    endpoint: Callable[..., Any]

    @classmethod
    def from_api_route(cls, route: Any) -> 'RouteOperation':
        # FastAPI keeps methods as an unordered set
        return cls(
            methods=tuple(sorted(route.methods or ())),
            path=route.path,
            endpoint=route.endpoint
        )

    @property
    def label(self) -> str:
        return f"[{','.join(self.methods)}] {self.path}"
