from typing import Any, List, Optional

from apidoc.extracting.domain.errors import (
    ConfigurationError, InstantiationError, RenderingError, UnknownTypeError
)
from apidoc.extracting.domain.example_response import ExampleResponse
from apidoc.extracting.domain.resolution_request import ResolutionRequest
from apidoc.extracting.domain.route_operation import RouteOperation
from apidoc.extracting.interfaces.annotation_source import AnnotationSource
from apidoc.extracting.interfaces.capabilities import CollectionRenderable
from apidoc.extracting.interfaces.response_renderer import ResponseRenderer
from apidoc.extracting.logging.diagnostic_logger import DiagnosticLogger
from apidoc.extracting.services.resource_tag_parser import ResourceTagParser
from apidoc.extracting.services.sample_instance_resolver import SampleInstanceResolver, normalize_type_id
from apidoc.registry.services.type_registry import TypeRegistry

FAILURE_SUMMARIES = {
    ConfigurationError: "Missing resource annotation when fetching API resource response",
    InstantiationError: "Unable to instantiate a sample model when fetching API resource response",
    RenderingError: "Unable to render API resource response",
}
DEFAULT_FAILURE_SUMMARY = "Exception thrown when fetching API resource response"


class UseResourceTagsStrategy:
    """
    Builds an example response from `@resource` / `@resourceCollection` tags.

    Returns a one-element list of ExampleResponse, or None when the route has
    no resource tag or anything goes wrong. Failures never propagate; each is
    logged with the route's methods and path.
    """

    def __init__(
            self,
            annotations: AnnotationSource,
            resolver: SampleInstanceResolver,
            renderer: ResponseRenderer,
            types: TypeRegistry,
            diagnostics: Optional[DiagnosticLogger] = None,
            parser: Optional[ResourceTagParser] = None
    ):
        self.annotations = annotations
        self.resolver = resolver
        self.renderer = renderer
        self.types = types
        self.diagnostics = diagnostics or DiagnosticLogger()
        self.parser = parser or ResourceTagParser()

    def __call__(self, route: RouteOperation) -> Optional[List[ExampleResponse]]:
        try:
            request = self.parser.parse(self.annotations.get_tags(route))
            if request is None:
                return None
            return [self.build_example(request)]
        except Exception as exc:
            self.diagnostics.route_failure(route.label, self._summary_for(exc), exc)
            return None

    def build_example(self, request: ResolutionRequest) -> ExampleResponse:
        first = self.resolver.resolve(request.model_type, request.states)
        resource_class = self._resource_class(request.resource_type)
        resource = self._wrap(resource_class, first)

        if request.is_collection:
            items = [first, self.resolver.resolve(request.model_type, request.states)]
            resource = self._wrap_collection(resource_class, resource, items)

        try:
            rendered = self.renderer.render(resource)
        except Exception as exc:
            raise RenderingError(f"Failed to render {request.resource_type}: {exc}") from exc

        return ExampleResponse(
            status=request.status_code or rendered.status_code,
            content=rendered.content.decode("utf-8")
        )

    def _resource_class(self, resource_type: str) -> Any:
        try:
            return self.types.resolve(normalize_type_id(resource_type))
        except UnknownTypeError as exc:
            raise RenderingError(f"Unknown resource type {resource_type!r}") from exc

    def _wrap(self, resource_class: Any, instance: Any) -> Any:
        try:
            return resource_class(instance)
        except Exception as exc:
            # Collection-oriented resources only accept a list of items
            self.diagnostics.detail(
                "%s rejected a single item (%s); retrying with a one-item list.",
                resource_class.__name__, exc
            )
        try:
            return resource_class([instance])
        except Exception as exc:
            raise RenderingError(f"Failed to construct {resource_class.__name__}: {exc}") from exc

    def _wrap_collection(self, resource_class: Any, resource: Any, items: List[Any]) -> Any:
        try:
            if isinstance(resource, CollectionRenderable):
                return resource_class(items)
            return resource_class.collection(items)
        except Exception as exc:
            raise RenderingError(f"Failed to build a collection of {resource_class.__name__}: {exc}") from exc

    def _summary_for(self, exc: BaseException) -> str:
        for error_type, summary in FAILURE_SUMMARIES.items():
            if isinstance(exc, error_type):
                return summary
        return DEFAULT_FAILURE_SUMMARY
