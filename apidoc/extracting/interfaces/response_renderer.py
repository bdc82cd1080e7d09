from abc import ABC, abstractmethod
from typing import Any

from apidoc.extracting.domain.example_response import RenderedResponse


class ResponseRenderer(ABC):
    """
    Serializes a wrapped resource into a transport payload and status code.
    """

    @abstractmethod
    def render(self, resource: Any) -> RenderedResponse:
        pass
