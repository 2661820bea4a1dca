from pathlib import Path
from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

def make_engine(url: str, echo: bool = False) -> Engine:
    # sessions are handed out across FastAPI's threadpool
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, connect_args=connect_args)

def init_db(engine: Engine) -> None:
    from . import models  # noqa: F401
    db = engine.url.database
    if engine.url.get_backend_name() == "sqlite" and db and db != ":memory:":
        Path(db).parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(engine)

def get_session(request: Request):
    # rows handed back by a commit stay loaded, no refresh round trip
    with Session(request.app.state.engine, expire_on_commit=False) as session:
        yield session
