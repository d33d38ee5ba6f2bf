from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from .errors import ConnectionOpenError, LivenessCheckError

# Schema the orders table is declared in.
DEFAULT_SCHEMA = "inventory"

# Base class for declarative ORM models.
Base = declarative_base()


def get_engine(database_url):
    """Create the SQLAlchemy engine for the given connection string."""
    try:
        return create_engine(database_url)
    except SQLAlchemyError as e:
        raise ConnectionOpenError(f"invalid database url: {e}") from e


def open_connection(engine, schema=DEFAULT_SCHEMA):
    """
    Opens the single connection the generator works on and checks it is alive.

    The ORM models are declared in DEFAULT_SCHEMA. When another schema is
    configured the statements are rewritten through schema_translate_map;
    None (or "") means the database's default schema.
    """
    try:
        connection = engine.connect()
    except SQLAlchemyError as e:
        raise ConnectionOpenError(f"failed to connect to database: {e}") from e

    if schema != DEFAULT_SCHEMA:
        connection = connection.execution_options(
            schema_translate_map={DEFAULT_SCHEMA: schema or None}
        )

    try:
        # Round trip before anything relies on the connection.
        connection.execute(text("SELECT 1"))
        connection.commit()
    except SQLAlchemyError as e:
        raise LivenessCheckError(f"database is not reachable: {e}") from e

    return connection


def session_factory(connection):
    """A configured "Session" class bound to the generator's connection."""
    return sessionmaker(bind=connection, autoflush=False, expire_on_commit=False)
