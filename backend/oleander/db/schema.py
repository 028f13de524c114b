from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.schema import CreateSchema, DropSchema

from oleander.core.errors import ResetNotConfirmed
from oleander.db.base import SCHEMA, Base
from oleander.models.user import User  # noqa: F401  registers the table

logger = logging.getLogger(__name__)


def drop_schema_ddl(name: str = SCHEMA) -> DropSchema:
    return DropSchema(name, cascade=True, if_exists=True)


def create_schema_ddl(name: str = SCHEMA, if_not_exists: bool = False) -> CreateSchema:
    return CreateSchema(name, if_not_exists=if_not_exists)


def _supports_schemas(engine: Engine) -> bool:
    return engine.dialect.name != "sqlite"


def create_schema(engine: Engine) -> None:
    with engine.begin() as conn:
        if _supports_schemas(engine):
            conn.execute(create_schema_ddl(if_not_exists=True))
        Base.metadata.create_all(conn, checkfirst=True)


def reset_schema(engine: Engine, confirm: bool = False) -> None:
    if not confirm:
        raise ResetNotConfirmed("refusing to drop schema %r without confirmation" % SCHEMA)

    logger.warning("resetting schema %s on %s", SCHEMA, engine.url.render_as_string(hide_password=True))
    with engine.begin() as conn:
        if _supports_schemas(engine):
            conn.execute(drop_schema_ddl())
            conn.execute(create_schema_ddl())
        else:
            Base.metadata.drop_all(conn, checkfirst=True)
        Base.metadata.create_all(conn)


def table_names(engine: Engine) -> list[str]:
    schema = SCHEMA if _supports_schemas(engine) else None
    return inspect(engine).get_table_names(schema=schema)
