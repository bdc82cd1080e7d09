from abc import ABC, abstractmethod
from typing import List

from apidoc.extracting.domain.route_operation import RouteOperation
from apidoc.extracting.domain.tag import Tag


class AnnotationSource(ABC):
    """
    Supplies the annotation tags of one documented operation, in source order.
    """

    @abstractmethod
    def get_tags(self, route: RouteOperation) -> List[Tag]:
        pass
