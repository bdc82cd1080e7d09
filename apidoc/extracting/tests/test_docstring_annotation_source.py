from apidoc.extracting.domain.route_operation import RouteOperation
from apidoc.extracting.domain.tag import Tag
from apidoc.extracting.services.docstring_annotation_source import DocstringAnnotationSource
from apidoc.extracting.services.resource_tag_parser import ResourceTagParser


def _endpoint():
    """
    Show a user.

    Some prose mentioning an email like someone@example.com.

    @resource 200 samples.UserResource
    @resourceModel   samples.User
    @resourceState admin, unverified
    @deprecated
    """


def _undocumented():
    pass


def test_tags_are_read_in_source_order():
    route = RouteOperation(methods=("GET",), path="/users/{id}", endpoint=_endpoint)
    tags = DocstringAnnotationSource().get_tags(route)

    assert tags == [
        Tag("resource", "200 samples.UserResource"),
        Tag("resourceModel", "samples.User"),
        Tag("resourceState", "admin, unverified"),
        Tag("deprecated", ""),
    ]


def test_endpoint_without_docstring_has_no_tags():
    route = RouteOperation(methods=("GET",), path="/", endpoint=_undocumented)

    assert DocstringAnnotationSource().get_tags(route) == []


def _wrapped():
    """
    @resourceCollection 200
        samples.UserCollection
    @resourceState admin,
        unverified
    @resourceModel samples.User

    Prose after a blank line is not part of any tag.
    """


def test_wrapped_tag_content_is_joined_until_blank_line_or_next_tag():
    route = RouteOperation(methods=("GET",), path="/users", endpoint=_wrapped)
    tags = DocstringAnnotationSource().get_tags(route)

    assert tags == [
        Tag("resourceCollection", "200 samples.UserCollection"),
        Tag("resourceState", "admin, unverified"),
        Tag("resourceModel", "samples.User"),
    ]
    assert ResourceTagParser().states(tags) == ("admin", "unverified")
