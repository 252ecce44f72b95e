from models.user import User
from models.post import Post
from models.profile import Profile
from models.user_follow import UserFollow
from sqlalchemy import create_engine, event
from sqlalchemy.orm import scoped_session, sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from models.base_model import Base
import logging

logger = logging.getLogger(__name__)

# Map model names for easy querying
classes = {
    "User": User,
    "Post": Post,
    "Profile": Profile,
    "UserFollow": UserFollow,
}


class DBStorage:
    __engine = None
    __session = None

    def __init__(self, database_url=None, echo=False):
        if database_url:
            self.__engine = self._make_engine(database_url, echo)

    @staticmethod
    def _make_engine(database_url, echo=False):
        """Build an engine; SQLite gets foreign keys switched on."""
        kwargs = {"echo": echo}
        if database_url.startswith("sqlite"):
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                # One shared connection, otherwise every checkout sees an empty db
                kwargs["poolclass"] = StaticPool
                kwargs["connect_args"] = {"check_same_thread": False}
        else:
            kwargs["pool_pre_ping"] = True
        engine = create_engine(database_url, **kwargs)

        if engine.url.get_backend_name() == "sqlite":
            # Needed for ON DELETE CASCADE on posts, profiles and follows
            @event.listens_for(engine, "connect")
            def _set_sqlite_pragma(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        return engine

    def reload(self, database_url=None, echo=False):
        """Create tables and start session"""
        if database_url:
            if self.__session is not None:
                self.__session.remove()
            if self.__engine is not None:
                self.__engine.dispose()
            self.__engine = self._make_engine(database_url, echo)
        if self.__engine is None:
            raise RuntimeError("DBStorage has no database configured")
        Base.metadata.create_all(self.__engine)
        logger.info("Database schema ready on %s", self.__engine.url.render_as_string(hide_password=True))
        session_factory = sessionmaker(bind=self.__engine, expire_on_commit=False)
        self.__session = scoped_session(session_factory)

    def new(self, obj):
        """Add object to session"""
        self.__session.add(obj)

    def save(self):
        """Commit session"""
        try:
            self.__session.commit()
        except SQLAlchemyError:
            self.__session.rollback()
            raise

    def delete(self, obj=None):
        """Delete object if exists"""
        if obj:
            self.__session.delete(obj)

    def get(self, cls, id):
        """Fetch one object by class and primary key"""
        if cls in classes.values():
            return self.__session.get(cls, id)
        return None

    def count(self, cls):
        """Count objects"""
        return self.__session.query(cls).count()

    def close(self):
        """Remove session (for API teardown)"""
        if self.__session is not None:
            self.__session.remove()

    def drop_all(self):
        """Drop every table; used by tests to reset state"""
        self.close()
        Base.metadata.drop_all(self.__engine)

    # expose the SQLAlchemy session for advanced querying (joins, filters, etc.)
    def get_session(self):
        return self.__session
