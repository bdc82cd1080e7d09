from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

from apidoc.extracting.domain.errors import InstantiationError
from apidoc.extracting.interfaces.data_store import DataStore
from apidoc.extracting.interfaces.factory_provider import FactoryProvider
from apidoc.extracting.interfaces.plain_constructor import PlainConstructor
from apidoc.extracting.logging.diagnostic_logger import DiagnosticLogger

NAMESPACE_SEPARATORS = "\\."


def normalize_type_id(type_id: str) -> str:
    # Factories are registered without a leading separator, but annotations
    # may be written either way.
    return type_id.strip().lstrip(NAMESPACE_SEPARATORS)


@dataclass(frozen=True)
class StageOutcome:
    instance: Any = None
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, instance: Any) -> 'StageOutcome':
        return cls(instance=instance)

    @classmethod
    def failure(cls, error: BaseException) -> 'StageOutcome':
        return cls(error=error)


class _Attempt:
    """
    Per-call state: the bare instance is built once and shared by the
    database and bare-construction stages.
    """

    def __init__(self, type_id: str, states: Tuple[str, ...]):
        self.type_id = type_id
        self.states = states
        self._bare: Optional[StageOutcome] = None

    def bare(self, constructor: PlainConstructor) -> StageOutcome:
        if self._bare is None:
            try:
                self._bare = StageOutcome.success(constructor.construct(self.type_id))
            except Exception as exc:
                self._bare = StageOutcome.failure(exc)
        return self._bare


class SampleInstanceResolver:
    """
    Produces one best-effort sample instance of a model type.

    Stages run in order and the first success wins:
    1. model factory (in memory, or persisted then rolled back),
    2. first stored row, for persistence-capable types,
    3. plain no-argument construction.
    Intermediate failures are only reported as verbose diagnostics.
    """

    def __init__(
            self,
            factories: FactoryProvider,
            data_store: DataStore,
            constructor: PlainConstructor,
            diagnostics: Optional[DiagnosticLogger] = None,
            use_transactions: bool = False
    ):
        self.factories = factories
        self.data_store = data_store
        self.constructor = constructor
        self.diagnostics = diagnostics or DiagnosticLogger()
        self.use_transactions = use_transactions

    def resolve(self, type_id: str, states: Sequence[str] = ()) -> Any:
        attempt = _Attempt(normalize_type_id(type_id), tuple(states))
        stages: List[Callable[[_Attempt], StageOutcome]] = [
            self._from_factory,
            self._from_database,
            self._from_constructor,
        ]

        last: Optional[StageOutcome] = None
        for stage in stages:
            last = stage(attempt)
            if last.succeeded:
                return last.instance

        raise InstantiationError(
            attempt.type_id,
            f"Unable to instantiate {attempt.type_id}: {last.error}"
        ) from last.error

    def _from_factory(self, attempt: _Attempt) -> StageOutcome:
        try:
            if self.use_transactions:
                instance = self.factories.persist_and_rollback(attempt.type_id, attempt.states)
            else:
                instance = self.factories.build(attempt.type_id, attempt.states)
        except Exception as exc:
            self.diagnostics.detail(
                "Model factory failed to instantiate %s (%s); trying to fetch from database.",
                attempt.type_id, exc
            )
            return StageOutcome.failure(exc)
        return StageOutcome.success(instance)

    def _from_database(self, attempt: _Attempt) -> StageOutcome:
        bare = attempt.bare(self.constructor)
        if not bare.succeeded:
            return bare
        if not self.data_store.is_persistable(bare.instance):
            return StageOutcome.failure(LookupError(f"{attempt.type_id} is not a stored type"))

        try:
            first = self.data_store.fetch_first(attempt.type_id)
        except Exception as exc:
            self.diagnostics.detail(
                "Failed to fetch first %s from database (%s); using plain construction.",
                attempt.type_id, exc
            )
            return StageOutcome.failure(exc)

        if first is None:
            return StageOutcome.failure(LookupError(f"No stored {attempt.type_id} found"))
        return StageOutcome.success(first)

    def _from_constructor(self, attempt: _Attempt) -> StageOutcome:
        return attempt.bare(self.constructor)
