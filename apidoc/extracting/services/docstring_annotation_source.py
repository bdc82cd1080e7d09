import inspect
import re
from typing import List, Optional, Tuple

from apidoc.extracting.domain.route_operation import RouteOperation
from apidoc.extracting.domain.tag import Tag
from apidoc.extracting.interfaces.annotation_source import AnnotationSource

TAG_LINE_PATTERN = re.compile(r"^\s*@([A-Za-z][\w-]*)(?:[ \t]+(.*))?$")


class DocstringAnnotationSource(AnnotationSource):
    """
    Reads `@name content` tags from the endpoint's docstring.
    A tag's content continues over the following lines until a blank line or
    the next tag; wrapped lines are joined with a single space.
    """

    def get_tags(self, route: RouteOperation) -> List[Tag]:
        doc = inspect.getdoc(route.endpoint) or ""
        return self.parse(doc)

    def parse(self, doc: str) -> List[Tag]:
        tags = []
        current: Optional[Tuple[str, List[str]]] = None
        for line in doc.splitlines():
            match = TAG_LINE_PATTERN.match(line)
            if match:
                if current:
                    tags.append(self._tag(*current))
                current = (match.group(1), [(match.group(2) or "").strip()])
            elif not line.strip():
                if current:
                    tags.append(self._tag(*current))
                current = None
            elif current:
                current[1].append(line.strip())
        if current:
            tags.append(self._tag(*current))
        return tags

    def _tag(self, name: str, pieces: List[str]) -> Tag:
        return Tag(name=name, content=" ".join(piece for piece in pieces if piece))
