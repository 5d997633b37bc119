"""Database models, connection management and CRUD repositories."""

from wayfinder.db.connection import close_db, get_db_session, init_db
from wayfinder.db.crud import BaseCRUD
from wayfinder.db.models import Base

__all__ = ["Base", "BaseCRUD", "close_db", "get_db_session", "init_db"]
