from pathlib import Path

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
import logging

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE HANDLE
# =============================================================================

class Database:
    """
    Owns the engine and session factory for one database.

    Built once at application startup, stored on ``app.state.db`` and
    closed at shutdown. Routes reach it through ``app.api.deps.get_db``.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        connect_args = {}

        url_obj = make_url(url)
        if url_obj.get_backend_name() == "sqlite":
            # Requests may be served from a different thread than the one
            # that opened the connection
            connect_args["check_same_thread"] = False
            if url_obj.database and url_obj.database != ":memory:":
                Path(url_obj.database).parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(
            url,
            echo=echo,  # Print all SQL queries to console
            pool_pre_ping=True,
            connect_args=connect_args,
        )
        self.SessionLocal = sessionmaker(
            autoflush=False,
            bind=self.engine,
            expire_on_commit=False  # Records stay readable after commit/delete
        )

        @event.listens_for(self.engine, "connect")
        def on_connect(dbapi_conn, connection_record):
            logger.debug("New database connection established")

    def session(self) -> Session:
        return self.SessionLocal()

    def create_tables(self):
        """Create every table defined in models if it does not exist yet."""
        # Register the models on Base.metadata
        import app.models.student  # noqa: F401

        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables initialized")

    def drop_tables(self):
        """
        Drop all database tables.

        Only used by tests.
        """
        logger.warning("Dropping all database tables...")
        Base.metadata.drop_all(bind=self.engine)

    def check_connection(self) -> bool:
        """
        Check if database connection is working.

        Returns:
            bool: True if connection successful, False otherwise
        """
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def close(self):
        self.engine.dispose()
        logger.info("Database connection closed")


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db(url: str, echo: bool = False) -> Database:
    """
    Open the database and make sure the schema exists.
    Run this when starting the application.
    """
    logger.info(f"Initializing database at {url}...")
    db = Database(url, echo=echo)

    if not db.check_connection():
        db.close()
        raise RuntimeError("Cannot connect to database!")

    db.create_tables()
    logger.info("Connected to database")
    return db
