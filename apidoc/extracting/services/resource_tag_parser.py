import re
from typing import Optional, Sequence, Tuple

from apidoc.extracting.domain.errors import ConfigurationError
from apidoc.extracting.domain.resolution_request import ResolutionRequest, ResourceKind
from apidoc.extracting.domain.tag import Tag

RESOURCE_TAG = "resource"
RESOURCE_COLLECTION_TAG = "resourcecollection"
RESOURCE_MODEL_TAG = "resourcemodel"
RESOURCE_STATE_TAG = "resourcestate"

STATUS_AND_TYPE_PATTERN = re.compile(r"^(\d{3})?\s?([\s\S]*)$")


def _first(tags: Sequence[Tag], *names: str) -> Optional[Tag]:
    for tag in tags:
        if tag.is_named(*names):
            return tag
    return None


class ResourceTagParser:
    """
    Turns the `@resource`, `@resourceCollection`, `@resourceModel` and
    `@resourceState` tags of a route into a ResolutionRequest.
    For each tag name only the first occurrence counts.
    """

    def parse(self, tags: Sequence[Tag]) -> Optional[ResolutionRequest]:
        kind_tag = self.kind_tag(tags)
        if kind_tag is None:
            return None

        status_code, resource_type = self.status_and_resource_type(kind_tag)
        kind = ResourceKind.COLLECTION if kind_tag.is_named(RESOURCE_COLLECTION_TAG) else ResourceKind.SINGLE

        return ResolutionRequest(
            kind=kind,
            status_code=status_code,
            resource_type=resource_type,
            model_type=self.model_type(tags),
            states=self.states(tags)
        )

    def kind_tag(self, tags: Sequence[Tag]) -> Optional[Tag]:
        return _first(tags, RESOURCE_TAG, RESOURCE_COLLECTION_TAG)

    def status_and_resource_type(self, tag: Tag) -> Tuple[int, str]:
        # [\s\S]* always matches, so the pattern cannot fail
        match = STATUS_AND_TYPE_PATTERN.match(tag.content)
        status = int(match.group(1)) if match.group(1) else 0
        resource_type = match.group(2).strip()
        if not resource_type:
            raise ConfigurationError(
                f"Failed to detect an API resource class in @{tag.name}. "
                "Please specify a resource using @resource or @resourceCollection."
            )
        return status, resource_type

    def model_type(self, tags: Sequence[Tag]) -> str:
        tag = _first(tags, RESOURCE_MODEL_TAG)
        model_type = tag.content.strip() if tag else ""
        if not model_type:
            raise ConfigurationError(
                "Failed to detect an API resource model. "
                "Please specify a model using @resourceModel."
            )
        return model_type

    def states(self, tags: Sequence[Tag]) -> Tuple[str, ...]:
        tag = _first(tags, RESOURCE_STATE_TAG)
        if tag is None:
            return ()
        pieces = (piece.strip() for piece in tag.content.split(","))
        return tuple(piece for piece in pieces if piece)
