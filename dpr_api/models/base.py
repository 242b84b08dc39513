"""
Base models for the application's database layer.

Provides the SQLAlchemy declarative base and an abstract model carrying the
server-assigned audit timestamps plus a plain-dict serializer.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict

from sqlalchemy import Column, DateTime, func
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

# Create the base class for declarative models
Base = declarative_base()


class BaseModel(Base):
    """
    Abstract base model that provides common audit fields for all inheriting models.
    """
    __abstract__ = True

    created_at = Column(DateTime, server_default=func.current_timestamp())
    updated_at = Column(DateTime, server_default=func.current_timestamp())

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the row into a plain dictionary keyed by column name.

        Date and datetime values are rendered as ISO-8601 strings so the result
        can be passed straight to a JSON encoder.
        """
        data = {}
        for column in self.__table__.columns:
            value = getattr(self, column.name)
            if isinstance(value, (datetime, date)):
                value = value.isoformat()
            data[column.name] = value
        return data
