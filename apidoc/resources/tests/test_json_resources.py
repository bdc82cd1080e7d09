import json
from datetime import datetime

import pytest

from apidoc.extracting.interfaces.capabilities import CollectionRenderable
from apidoc.resources.json_resource import (
    AnonymousResourceCollection, JsonResource, ResourceCollection, attributes_of
)
from apidoc.resources.json_resource_renderer import JsonResourceRenderer
from apidoc.tests.harness.sample_app import (
    CreatedUserResource, Greeting, PostModel, UserCollection, UserModel, UserResource
)


class Unwrapped(JsonResource):
    wrap = None


class Stamped:
    def __init__(self):
        self.at = datetime(2024, 1, 2, 3, 4, 5)
        self._secret = "hidden"


def _user(user_id=1):
    return UserModel(id=user_id, name="Ada", email="ada@example.com", role="member", is_verified=True)


def test_attributes_of_mapped_plain_and_dict_items():
    assert attributes_of(PostModel(id=3, title="T", body="B")) == {"id": 3, "title": "T", "body": "B"}
    assert attributes_of(Greeting()) == {"text": "hello", "language": "en"}
    assert attributes_of({"a": 1}) == {"a": 1}
    assert attributes_of(7) == 7
    assert "_secret" not in attributes_of(Stamped())


def test_resource_collection_rejects_single_items():
    assert isinstance(UserCollection([_user()]), CollectionRenderable)
    assert not isinstance(UserResource(_user()), CollectionRenderable)

    with pytest.raises(TypeError):
        UserCollection(_user())


def test_collection_entry_point_uses_item_resource():
    collection = UserResource.collection([_user(1), _user(2)])

    assert isinstance(collection, AnonymousResourceCollection)
    assert collection.to_payload() == {"data": [
        {"id": 1, "name": "Ada", "email": "ada@example.com", "role": "member"},
        {"id": 2, "name": "Ada", "email": "ada@example.com", "role": "member"},
    ]}


def test_untyped_collection_uses_default_attributes():
    assert ResourceCollection([{"a": 1}, Greeting()]).to_array() == [{"a": 1}, {"text": "hello", "language": "en"}]


def test_renderer_produces_json_body_and_status():
    renderer = JsonResourceRenderer()

    created = renderer.render(CreatedUserResource(_user()))
    unwrapped = renderer.render(Unwrapped(Stamped()))

    assert created.status_code == 201
    assert json.loads(created.content)["data"]["name"] == "Ada"
    assert unwrapped.status_code == 200
    assert json.loads(unwrapped.content) == {"at": "2024-01-02T03:04:05"}
