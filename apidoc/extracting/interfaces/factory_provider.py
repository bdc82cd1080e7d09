from abc import ABC, abstractmethod
from typing import Any, Sequence


class FactoryProvider(ABC):
    """
    Builds sample instances from registered model factories.
    Both methods raise on any failure (unknown type, missing factory,
    unknown state, factory error).
    """

    @abstractmethod
    def build(self, type_id: str, states: Sequence[str] = ()) -> Any:
        """Build an in-memory instance without touching storage."""
        pass

    @abstractmethod
    def persist_and_rollback(self, type_id: str, states: Sequence[str] = ()) -> Any:
        """
        Persist a factory-built instance inside a transaction, then roll the
        transaction back on every exit path and return the in-memory instance.
        """
        pass
