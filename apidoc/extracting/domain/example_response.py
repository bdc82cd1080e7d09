from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class RenderedResponse:
    status_code: int
    content: bytes


@dataclass(frozen=True)
class ExampleResponse:
    """
    One documented example response for a route.
    """
    status: int
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.status, "content": self.content}
