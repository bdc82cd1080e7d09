from typing import Optional, Tuple

from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from apidoc.config.settings import Settings


def create_session_factory(database_url: Optional[str] = None) -> Tuple[Engine, sessionmaker]:
    url = database_url or Settings().DATABASE_URL
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, pool_pre_ping=True, connect_args=connect_args)
    session_factory = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    return engine, session_factory


def init_db(engine: Engine, metadata: MetaData):
    metadata.create_all(bind=engine)
