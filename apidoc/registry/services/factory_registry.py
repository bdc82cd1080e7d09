from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

StateOverrides = Union[Mapping[str, Any], Callable[[], Mapping[str, Any]]]


@dataclass(frozen=True)
class FactoryDefinition:
    """
    How to build a sample of one model type: a callable producing default
    attribute values, plus named states that override some of them.
    """
    model: type
    definition: Callable[[], Mapping[str, Any]]
    states: Mapping[str, StateOverrides] = field(default_factory=dict)

    def attributes(self, states: Sequence[str] = ()) -> Dict[str, Any]:
        attributes = dict(self.definition())
        for name in states:
            if name not in self.states:
                raise KeyError(f"Unable to locate [{name}] state for [{self.model.__name__}].")
            overrides = self.states[name]
            attributes.update(overrides() if callable(overrides) else overrides)
        return attributes

    def make(self, states: Sequence[str] = ()) -> Any:
        return self.model(**self.attributes(states))


class FactoryRegistry:

    def __init__(self):
        self._definitions: Dict[str, FactoryDefinition] = {}

    def define(
            self,
            type_id: str,
            model: type,
            definition: Callable[[], Mapping[str, Any]],
            states: Optional[Mapping[str, StateOverrides]] = None
    ) -> FactoryDefinition:
        factory = FactoryDefinition(model=model, definition=definition, states=dict(states or {}))
        self._definitions[type_id] = factory
        return factory

    def get(self, type_id: str) -> FactoryDefinition:
        try:
            return self._definitions[type_id]
        except KeyError:
            raise LookupError(f"Unable to locate factory for [{type_id}].")

    def __contains__(self, type_id: str) -> bool:
        return type_id in self._definitions
