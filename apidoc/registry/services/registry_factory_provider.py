import logging
from typing import Any, Optional, Sequence

from sqlalchemy.orm import sessionmaker

from apidoc.extracting.interfaces.factory_provider import FactoryProvider
from apidoc.registry.services.factory_registry import FactoryRegistry

logger = logging.getLogger(__name__)


class RegistryFactoryProvider(FactoryProvider):
    """
    FactoryProvider backed by a FactoryRegistry.
    The transactional variant needs a SQLAlchemy session factory.
    """

    def __init__(self, factories: FactoryRegistry, session_factory: Optional[sessionmaker] = None):
        self.factories = factories
        self.session_factory = session_factory

    def build(self, type_id: str, states: Sequence[str] = ()) -> Any:
        return self.factories.get(type_id).make(states)

    def persist_and_rollback(self, type_id: str, states: Sequence[str] = ()) -> Any:
        if self.session_factory is None:
            raise RuntimeError("Transactional factory builds require a session factory")

        session = self.session_factory()
        try:
            instance = self.factories.get(type_id).make(states)
            session.add(instance)
            # flush runs the INSERT so database defaults and keys are populated
            session.flush()
            logger.debug("Persisted sample %s inside a throwaway transaction", type_id)
            return instance
        finally:
            session.rollback()
            session.close()
