from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError
from sqlalchemy import select
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm import Session

from oleander.core.errors import ConstraintViolation, NotFound, UniquenessViolation
from oleander.models.user import User
from oleander.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


def _validate(model: type[BaseModel], body: Any):
    if isinstance(body, model):
        return body
    if isinstance(body, BaseModel):
        body = body.model_dump(exclude_unset=True)
    if body is None:
        body = {}
    if not isinstance(body, Mapping):
        raise ConstraintViolation(message=f"expected a mapping of fields, got {type(body).__name__}")
    try:
        return model.model_validate(dict(body))
    except ValidationError as e:
        fields = []
        for err in e.errors():
            name = str(err["loc"][0]) if err.get("loc") else "?"
            if name not in fields:
                fields.append(name)
        raise ConstraintViolation(fields) from e


def _sqlstate(e: Exception) -> str | None:
    orig = getattr(e, "orig", None)
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def _is_unique_violation(e: IntegrityError) -> bool:
    code = _sqlstate(e)
    if code:
        return code == UNIQUE_VIOLATION
    # sqlite: "UNIQUE constraint failed: users.username"
    return "unique" in str(e.orig).lower()


def _summary(e: Exception) -> str:
    orig = getattr(e, "orig", None)
    diag = getattr(orig, "diag", None)
    primary = getattr(diag, "message_primary", None)
    if primary:
        return primary
    code = _sqlstate(e)
    if code:
        return f"sqlstate {code}"
    return str(orig).splitlines()[0] if orig is not None else type(e).__name__


def _commit(s: Session, username: str | None) -> None:
    try:
        s.commit()
    except IntegrityError as e:
        s.rollback()
        if _is_unique_violation(e):
            logger.warning("user write rejected: username %r taken", username)
            raise UniquenessViolation(username) from e
        msg = _summary(e)
        logger.warning("user write rejected: %s", msg)
        raise ConstraintViolation(message=msg) from e
    except DataError as e:
        s.rollback()
        msg = _summary(e)
        logger.warning("user write rejected: %s", msg)
        raise ConstraintViolation(message=msg) from e


def _find_by_username(s: Session, username: str) -> User | None:
    return s.execute(select(User).where(User.username == username)).scalar_one_or_none()


def get_user(s: Session, user_id: int) -> User:
    user = s.execute(select(User).where(User.id == user_id)).scalar_one_or_none()
    if user is None:
        raise NotFound(user_id)
    return user


def get_user_by_username(s: Session, username: str) -> User:
    user = _find_by_username(s, username)
    if user is None:
        raise NotFound(username)
    return user


def list_users(s: Session, limit: int | None = None) -> list[User]:
    q = select(User).order_by(User.id.asc())
    if limit is not None:
        q = q.limit(limit)
    return list(s.execute(q).scalars().all())


def create_user(s: Session, body: UserCreate | Mapping[str, Any]) -> User:
    data = _validate(UserCreate, body)

    if _find_by_username(s, data.username) is not None:
        logger.warning("user write rejected: username %r taken", data.username)
        raise UniquenessViolation(data.username)

    user = User(**data.model_dump())
    s.add(user)
    _commit(s, data.username)
    s.refresh(user)
    logger.info("user.create id=%s username=%s", user.id, user.username)
    return user


def update_user(s: Session, user_id: int, fields: UserUpdate | Mapping[str, Any]) -> User:
    changes = _validate(UserUpdate, fields).changes()
    if not changes:
        raise ConstraintViolation(message="no fields to update")

    user = get_user(s, user_id)

    username = changes.get("username")
    if username is not None and username != user.username:
        other = _find_by_username(s, username)
        if other is not None and other.id != user.id:
            logger.warning("user write rejected: username %r taken", username)
            raise UniquenessViolation(username)

    for k, v in changes.items():
        setattr(user, k, v)
    s.add(user)
    _commit(s, username)
    s.refresh(user)
    logger.info("user.update id=%s fields=%s", user.id, sorted(changes))
    return user


def delete_user(s: Session, user_id: int) -> None:
    user = get_user(s, user_id)
    username = user.username
    s.delete(user)
    s.commit()
    logger.info("user.delete id=%s username=%s", user_id, username)


def delete_user_by_username(s: Session, username: str) -> None:
    user = get_user_by_username(s, username)
    user_id = user.id
    s.delete(user)
    s.commit()
    logger.info("user.delete id=%s username=%s", user_id, username)
