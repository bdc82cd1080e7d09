import logging
from typing import Optional

from sqlalchemy.orm import sessionmaker

from apidoc.config.settings import ExtractionProfile
from apidoc.extracting.logging.diagnostic_logger import DiagnosticLogger
from apidoc.extracting.services.docstring_annotation_source import DocstringAnnotationSource
from apidoc.extracting.services.sample_instance_resolver import SampleInstanceResolver
from apidoc.extracting.services.use_resource_tags_strategy import UseResourceTagsStrategy
from apidoc.infrastructure.persistence.sqlalchemy_data_store import SqlAlchemyDataStore
from apidoc.registry.services.factory_registry import FactoryRegistry
from apidoc.registry.services.registry_factory_provider import RegistryFactoryProvider
from apidoc.registry.services.registry_plain_constructor import RegistryPlainConstructor
from apidoc.registry.services.type_registry import TypeRegistry
from apidoc.resources.json_resource_renderer import JsonResourceRenderer


def build_resource_tags_strategy(
        types: TypeRegistry,
        factories: FactoryRegistry,
        session_factory: sessionmaker,
        profile: Optional[ExtractionProfile] = None,
        logger: Optional[logging.Logger] = None
) -> UseResourceTagsStrategy:
    profile = profile or ExtractionProfile()
    diagnostics = DiagnosticLogger(logger, verbose=profile.verbose)

    resolver = SampleInstanceResolver(
        factories=RegistryFactoryProvider(factories, session_factory),
        data_store=SqlAlchemyDataStore(session_factory, types),
        constructor=RegistryPlainConstructor(types),
        diagnostics=diagnostics,
        use_transactions=profile.use_transactions
    )
    return UseResourceTagsStrategy(
        annotations=DocstringAnnotationSource(),
        resolver=resolver,
        renderer=JsonResourceRenderer(),
        types=types,
        diagnostics=diagnostics
    )
