from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()


def database_url(path) -> str:
    path = str(path)
    if path == ":memory:":
        return "sqlite://"
    return f"sqlite:///{path}"


def create_store_engine(path) -> Engine:
    return create_engine(database_url(path))


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    # only tables whose models have been imported get created
    Base.metadata.create_all(bind=engine)
