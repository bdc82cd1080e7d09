from abc import ABC, abstractmethod
from typing import Any


class PlainConstructor(ABC):

    @abstractmethod
    def construct(self, type_id: str) -> Any:
        """Create an instance of the type by calling it with no arguments."""
        pass
