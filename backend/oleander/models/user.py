from sqlalchemy import BigInteger, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from oleander.db.base import Base

TEXT_MAX = 200

# BIGSERIAL on postgres; sqlite only autoincrements a plain INTEGER primary key
Id = BigInteger().with_variant(Integer(), "sqlite")

class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Id, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(TEXT_MAX), nullable=False)
    last_name: Mapped[str] = mapped_column(String(TEXT_MAX), nullable=False)
    username: Mapped[str] = mapped_column(String(TEXT_MAX), nullable=False)
    pwd: Mapped[str] = mapped_column(String(TEXT_MAX), nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r})"
