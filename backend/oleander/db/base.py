from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

SCHEMA = "oleander"


class Base(DeclarativeBase):
    metadata = MetaData(schema=SCHEMA)
