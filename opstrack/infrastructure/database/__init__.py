from .base import Base
from .session import build_engine, build_session_factory, session_scope
from .store import build_sql_store

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "session_scope",
    "build_sql_store",
]
