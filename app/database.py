# app/database.py

from sqlalchemy import create_engine, event
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from app.core.config import settings


def _enable_sqlite_fk(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE clauses unless this is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, **kwargs):
    if database_url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        engine = create_engine(database_url, connect_args=connect_args, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_fk)
        return engine

    return create_engine(database_url, pool_pre_ping=True, **kwargs)


# Largest value an INTEGER primary key column accepts on every supported backend
MAX_INTEGER = 2_147_483_647


engine = create_db_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


class Base(DeclarativeBase):
    pass


def get_db():
    # Anything not committed by the request is rolled back on close
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
