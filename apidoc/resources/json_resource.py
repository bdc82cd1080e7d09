from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import inspect

from apidoc.extracting.interfaces.capabilities import CollectionRenderable


def attributes_of(item: Any) -> Any:
    """
    Default array form of a wrapped item: column values for SQLAlchemy models,
    public attributes for plain objects, dicts and scalars as they are.
    """
    if item is None or isinstance(item, (str, int, float, bool, list, tuple)):
        return item
    if isinstance(item, dict):
        return dict(item)

    mapper = inspect(type(item), raiseerr=False)
    if mapper is not None:
        return {attr.key: getattr(item, attr.key) for attr in mapper.column_attrs}

    if hasattr(item, "__dict__"):
        return {key: value for key, value in vars(item).items() if not key.startswith("_")}
    return item


class JsonResource:
    """
    Transforms one item into a serializable response shape.
    Subclasses override `to_array`; the payload is nested under `wrap`
    unless it is None.
    """
    wrap: Optional[str] = "data"
    status_code: int = 200

    def __init__(self, resource: Any):
        self.resource = resource

    def to_array(self) -> Any:
        return attributes_of(self.resource)

    def to_payload(self) -> Any:
        data = self.to_array()
        if self.wrap:
            return {self.wrap: data}
        return data

    @classmethod
    def collection(cls, items: Sequence[Any]) -> 'AnonymousResourceCollection':
        return AnonymousResourceCollection(items, collects=cls)


class ResourceCollection(JsonResource, CollectionRenderable):
    """
    Resource over a list of items. Each item goes through `collects` when it
    is set. Rejects anything that is not a list or tuple.
    """
    collects: Optional[type] = None

    def __init__(self, resource: Sequence[Any]):
        if not isinstance(resource, (list, tuple)):
            raise TypeError(f"{type(self).__name__} expects a list of items, got {type(resource).__name__}")
        super().__init__(list(resource))

    def to_array(self) -> List[Any]:
        if self.collects is None:
            return [attributes_of(item) for item in self.resource]
        return [self.collects(item).to_array() for item in self.resource]


class AnonymousResourceCollection(ResourceCollection):

    def __init__(self, resource: Sequence[Any], collects: type):
        self.collects = collects
        super().__init__(resource)

    def to_payload(self) -> Dict[str, Any]:
        # use the item resource's wrapping key
        data = self.to_array()
        wrap = getattr(self.collects, "wrap", self.wrap)
        return {wrap: data} if wrap else data
