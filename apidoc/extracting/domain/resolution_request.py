from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ResourceKind(Enum):
    SINGLE = "single"
    COLLECTION = "collection"


@dataclass(frozen=True)
class ResolutionRequest:
    """
    Everything the resource tags of one route declare.
    status_code is 0 when no status prefix was given.
    """
    kind: ResourceKind
    status_code: int
    resource_type: str
    model_type: str
    states: Tuple[str, ...] = ()

    @property
    def is_collection(self) -> bool:
        return self.kind == ResourceKind.COLLECTION
