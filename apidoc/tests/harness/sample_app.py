from typing import Tuple

from fastapi import FastAPI
from sqlalchemy import Boolean, Column, Integer, String, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from apidoc.registry.services.factory_registry import FactoryRegistry
from apidoc.registry.services.type_registry import TypeRegistry
from apidoc.resources.json_resource import JsonResource, ResourceCollection

Base = declarative_base()


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    role = Column(String, default="member")
    is_verified = Column(Boolean, default=True)


class PostModel(Base):
    # no factory: samples come from the database or plain construction
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    body = Column(String, default="")


class Greeting:
    def __init__(self):
        self.text = "hello"
        self.language = "en"


class Unbuildable:
    def __init__(self, required):
        self.required = required


class UserResource(JsonResource):
    def to_array(self):
        return {
            "id": self.resource.id,
            "name": self.resource.name,
            "email": self.resource.email,
            "role": self.resource.role,
        }


class CreatedUserResource(UserResource):
    status_code = 201


class UserCollection(ResourceCollection):
    collects = UserResource


def register_samples(types: TypeRegistry, factories: FactoryRegistry) -> None:
    types.alias("samples.User", UserModel)
    types.alias("samples.Post", PostModel)
    types.alias("samples.Greeting", Greeting)
    types.alias("samples.Unbuildable", Unbuildable)
    types.alias("samples.UserResource", UserResource)
    types.alias("samples.CreatedUserResource", CreatedUserResource)
    types.alias("samples.UserCollection", UserCollection)
    types.alias("samples.JsonResource", JsonResource)

    factories.define(
        "samples.User",
        UserModel,
        lambda: {"name": "Jane Doe", "email": "jane@example.com", "role": "member", "is_verified": True},
        states={
            "admin": {"role": "admin"},
            "unverified": {"is_verified": False},
            "renamed": lambda: {"name": "Renamed User"},
        },
    )


def in_memory_database() -> Tuple[Engine, sessionmaker]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine, sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


app = FastAPI()


@app.get("/users/{user_id}")
def show_user(user_id: int):
    """
    Show a single user.

    @resource samples.UserResource
    @resourceModel samples.User
    @resourceState admin
    """
    return {}


@app.get("/users")
def list_users():
    """
    @resourceCollection samples.UserCollection
    @resourceModel samples.User
    """
    return []


@app.post("/users")
def create_user():
    """
    @resource 201 samples.UserResource
    @resourceModel samples.User
    """
    return {}


@app.get("/posts/latest")
def latest_post():
    """
    @resource samples.JsonResource
    @resourceModel samples.Post
    """
    return {}


@app.get("/broken")
def broken():
    """
    @resource samples.JsonResource
    """
    return {}


@app.get("/health")
def health():
    """Liveness probe."""
    return {"ok": True}
