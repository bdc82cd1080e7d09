from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from apidoc.extracting.domain.example_response import RenderedResponse
from apidoc.extracting.interfaces.response_renderer import ResponseRenderer


class JsonResourceRenderer(ResponseRenderer):
    """
    Renders a JsonResource the way a FastAPI endpoint returning it would.
    """

    def render(self, resource: Any) -> RenderedResponse:
        payload = jsonable_encoder(resource.to_payload())
        response = JSONResponse(content=payload, status_code=getattr(resource, "status_code", 200))
        return RenderedResponse(status_code=response.status_code, content=bytes(response.body))
