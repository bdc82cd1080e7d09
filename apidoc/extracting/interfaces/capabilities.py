from abc import ABC


class CollectionRenderable(ABC):
    """
    Marker for resource types that are constructed directly from a collection
    of items instead of going through a `collection()` entry point.
    """
    pass
