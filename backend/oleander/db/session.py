from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from oleander.core.config import settings
from oleander.db.base import SCHEMA


def is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def make_engine(url: str | None = None, echo: bool | None = None) -> Engine:
    url = url or settings.database_url
    echo = settings.sql_echo if echo is None else echo

    if not is_sqlite(url):
        return create_engine(url, echo=echo, pool_pre_ping=True, future=True)

    # sqlite has no schemas; tables land in the main database
    kw = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url or url.rstrip("/") in ("sqlite:", "sqlite+pysqlite:"):
        kw["poolclass"] = StaticPool
    eng = create_engine(url, echo=echo, future=True, **kw)
    return eng.execution_options(schema_translate_map={SCHEMA: None})


def make_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


engine = make_engine()
SessionLocal = make_sessionmaker(engine)
