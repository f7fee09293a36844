"""Shared repository plumbing: the base class and database error translation."""

import json
from collections.abc import Callable
from functools import wraps
from typing import Any, Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from synapse.db import Base
from synapse.exceptions import RepositoryError
from synapse.logging import get_logger

T = TypeVar("T", bound=Base)
F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger("repository")


def translate_db_errors(operation: str) -> Callable[[F], F]:
    """
    Decorator converting SQLAlchemy failures into RepositoryError.

    Usage:
        @translate_db_errors("list_open_projects")
        def list_open_projects(self):
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SQLAlchemyError as e:
                logger.error(
                    "repository_error",
                    operation=operation,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise RepositoryError(operation) from e

        return wrapper  # type: ignore

    return decorator


def coerce_string_list(value: Any) -> list[str]:
    """
    Read a JSON list column that may also hold legacy JSON text.

    Unparsable or non-list values read as an empty list.
    """
    if value is None:
        return []
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return []
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


class BaseRepository(Generic[T]):
    """
    Session-bound data access for one model.

    Repositories never commit: the session scope that created them owns the
    transaction (see ``DatabaseManager.session``).

    Usage:
        with db.session() as session:
            rows = SkillRepository(session).list_skills(user_id)
    """

    model: type[T]

    def __init__(self, session: Session):
        self.session = session
