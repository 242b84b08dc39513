# models/__init__.py

from .base import Base, BaseModel
from .member_models import AnggotaDPR, SORTABLE_COLUMNS
from .db_init import DEFAULT_DB_URL, create_db_engine, get_database_url, init_db
