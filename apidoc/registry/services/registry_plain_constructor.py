from typing import Any

from apidoc.extracting.interfaces.plain_constructor import PlainConstructor
from apidoc.registry.services.type_registry import TypeRegistry


class RegistryPlainConstructor(PlainConstructor):

    def __init__(self, types: TypeRegistry):
        self.types = types

    def construct(self, type_id: str) -> Any:
        return self.types.resolve(type_id)()
