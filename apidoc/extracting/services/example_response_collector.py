from typing import Any, Callable, Dict, List, Optional

from fastapi.routing import APIRoute

from apidoc.extracting.domain.example_response import ExampleResponse
from apidoc.extracting.domain.route_operation import RouteOperation

Strategy = Callable[[RouteOperation], Optional[List[ExampleResponse]]]


class ExampleResponseCollector:
    """
    Runs a response strategy over every API route of a FastAPI app and keeps
    the routes that produced an example.
    """

    def __init__(self, strategy: Strategy):
        self.strategy = strategy

    def collect(self, app: Any) -> Dict[str, List[Dict[str, Any]]]:
        results: Dict[str, List[Dict[str, Any]]] = {}
        for route in app.routes:
            if not isinstance(route, APIRoute):
                continue
            operation = RouteOperation.from_api_route(route)
            examples = self.strategy(operation)
            if examples:
                results[operation.label] = [example.to_dict() for example in examples]
        return results
