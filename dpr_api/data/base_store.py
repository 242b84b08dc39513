"""
dpr_api/data/base_store.py

This module provides the base functionality for all data store classes:
scoped session acquisition, error translation decorators and shared
validation helpers.
"""

import contextlib
import logging
from functools import wraps
from typing import Any, Callable, Iterator, TypeVar, cast

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from dpr_api.data.errors import DataStoreError, DatabaseOperationError, ValidationError

logger = logging.getLogger(__name__)

# Type variable for decorators
F = TypeVar('F', bound=Callable[..., Any])


def database_operation(description: str) -> Callable[[F], F]:
    """
    Decorator factory that translates database failures into DatabaseOperationError.

    DataStoreError subclasses (e.g. ValidationError) pass through untouched so
    callers can still tell bad input apart from a failed query.

    Args:
        description: Human readable name of the operation, used in log lines

    Returns:
        Decorator wrapping the store method
    """
    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except DataStoreError:
                raise
            except SQLAlchemyError as e:
                error_msg = f"Database error {description}: {e}"
                logger.error(error_msg, exc_info=True)
                raise DatabaseOperationError(error_msg) from e
        return cast(F, wrapper)
    return decorator


class BaseStore:
    """
    BaseStore provides common functionality for all data store classes.

    Stores never hold a long-lived session. They share one session factory
    (bound to the process-wide engine) and open a short session per operation.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        """
        Initialize the store with a session factory.

        Args:
            session_factory: sessionmaker bound to the application engine

        Raises:
            ValidationError: If no session factory is supplied
        """
        if session_factory is None:
            raise ValidationError("A session factory is required")
        self.session_factory = session_factory

    @contextlib.contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a session for the duration of one read operation.

        Usage:
            with self.session_scope() as session:
                session.query(...)
        """
        session = self.session_factory()
        try:
            yield session
        finally:
            session.close()

    # Common validation functions
    def _validate_pagination_params(self, limit: int, offset: int) -> None:
        """
        Validate pagination parameters.

        Args:
            limit: Maximum records to return
            offset: Number of records to skip

        Raises:
            ValidationError: If parameters are invalid
        """
        if not isinstance(limit, int) or limit < 0:
            raise ValidationError("Limit must be a non-negative integer, got %s: %s" % (type(limit).__name__, limit))

        if not isinstance(offset, int) or offset < 0:
            raise ValidationError("Offset must be a non-negative integer, got %s: %s" % (type(offset).__name__, offset))
