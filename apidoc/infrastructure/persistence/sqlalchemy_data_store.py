from typing import Any, Optional

from sqlalchemy import inspect, select
from sqlalchemy.orm import sessionmaker

from apidoc.extracting.interfaces.data_store import DataStore
from apidoc.registry.services.type_registry import TypeRegistry


class SqlAlchemyDataStore(DataStore):
    """
    Looks up stored samples through SQLAlchemy.
    Only instances of mapped classes count as persistable.
    """

    def __init__(self, session_factory: sessionmaker, types: TypeRegistry):
        self.session_factory = session_factory
        self.types = types

    def is_persistable(self, instance: Any) -> bool:
        return inspect(type(instance), raiseerr=False) is not None

    def fetch_first(self, type_id: str) -> Optional[Any]:
        model = self.types.resolve(type_id)
        with self.session_factory() as session:
            instance = session.scalars(select(model).limit(1)).first()
            if instance is not None:
                # keep loaded attributes usable after the session closes
                session.expunge(instance)
            return instance
