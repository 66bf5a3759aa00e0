import logging
from collections.abc import Iterator
from threading import Lock

from fastapi import Request
from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from survey_backend.core.errors import StorageError


logger = logging.getLogger(__name__)

Base = declarative_base()


def _is_in_memory_sqlite(url: str) -> bool:
    return url.startswith('sqlite') and (':memory:' in url or url.rstrip('/') in {'sqlite:', 'sqlite+pysqlite:'})


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute('PRAGMA foreign_keys=ON')
    cursor.close()


class Database:
    """Storage client shared by every router.

    Built once at startup, stored on ``app.state.database`` and closed at
    shutdown. Each request gets its own session through ``get_db``.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        engine_options: dict = {'echo': echo}
        if url.startswith('sqlite'):
            engine_options['connect_args'] = {'check_same_thread': False}
            if _is_in_memory_sqlite(url):
                engine_options['poolclass'] = StaticPool
        else:
            engine_options['pool_pre_ping'] = True

        self.engine: Engine = create_engine(url, **engine_options)
        if url.startswith('sqlite'):
            event.listen(self.engine, 'connect', _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )
        self._schema_lock = Lock()
        self._response_schema_checked = False

    def create_schema(self) -> None:
        # Import registers the tables on Base.metadata.
        from survey_backend.models import response, template, user  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        self.ensure_response_schema()

    def ensure_response_schema(self) -> None:
        if self._response_schema_checked:
            return

        with self._schema_lock:
            if self._response_schema_checked:
                return

            inspector = inspect(self.engine)

            if 'responses' not in inspector.get_table_names():
                self._response_schema_checked = True
                return

            # Tables created by older deployments predate the lookup index.
            from survey_backend.models.response import user_template_index

            existing_indexes = {index['name'] for index in inspector.get_indexes('responses')}
            if user_template_index.name not in existing_indexes:
                user_template_index.create(bind=self.engine, checkfirst=True)
                logger.info('Created index %s.', user_template_index.name)

            self._response_schema_checked = True

    def session(self) -> Session:
        return self.SessionLocal()

    def close(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    storage = getattr(request.app.state, 'database', None)
    if storage is None:
        raise StorageError('Database unavailable. Verify DATABASE_URL and database credentials.')

    db = storage.session()
    try:
        yield db
    finally:
        db.close()
