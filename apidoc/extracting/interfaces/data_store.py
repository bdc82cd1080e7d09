from abc import ABC, abstractmethod
from typing import Any, Optional


class DataStore(ABC):

    @abstractmethod
    def is_persistable(self, instance: Any) -> bool:
        """True if the instance belongs to a type the store can query."""
        pass

    @abstractmethod
    def fetch_first(self, type_id: str) -> Optional[Any]:
        """Return one stored instance of the type, or None if there is none."""
        pass
