# shopcart/database.py
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine

from shopcart.core.errors import StorageError
from shopcart.core.events import ChangeNotifier

logger = logging.getLogger(__name__)

# Key in Session.info holding the tables written since the last commit
CHANGED_TABLES = "shopcart.changed_tables"
# Key in Session.info holding how many atomic() blocks are open
ATOMIC_DEPTH = "shopcart.atomic_depth"


# ---------------------------------------------------------
# Embedded SQLite store
#
# - check_same_thread=False : FastAPI runs sync endpoints on a threadpool,
#                             so a pooled connection may be reused by
#                             another thread
# - PRAGMA foreign_keys=ON  : SQLite ships with FK enforcement off; the
#                             addresses -> user_profile cascade needs it
#                             on every new connection
# ---------------------------------------------------------


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def mark_changed(session: Session, *tables: str) -> None:
    """
    Record that `tables` were written in the session's current transaction.

    Subscribers of those tables are notified once the transaction commits;
    nothing is published if it rolls back.
    """
    session.info.setdefault(CHANGED_TABLES, set()).update(tables)


@contextmanager
def atomic(session: Session) -> Iterator[Session]:
    """
    Run a block as a single unit of work: commit on success, roll back
    everything on any error.

    Nested blocks join the outermost one; only that one commits or rolls
    back.
    """
    depth = session.info.get(ATOMIC_DEPTH, 0)
    session.info[ATOMIC_DEPTH] = depth + 1
    try:
        yield session
        if depth == 0:
            session.commit()
    except Exception:
        if depth == 0:
            session.rollback()
        raise
    finally:
        session.info[ATOMIC_DEPTH] = depth


class Database:
    """
    Owns the engine and the change notifier for one store.

    Built once by the composition root (see `shopcart.main.create_app`) and
    passed explicitly to whatever needs it.
    """

    def __init__(self, url: str, *, echo: bool = False):
        connect_args = {}
        if url.startswith("sqlite"):
            connect_args["check_same_thread"] = False

        self.url = url
        self.engine = create_engine(url, echo=echo, connect_args=connect_args)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.notifier = ChangeNotifier()

    def create_db_and_tables(self) -> None:
        """
        Create all tables defined in SQLModel metadata if they do not exist.

        This is called once on application startup.
        """
        # Import models so SQLModel metadata is populated before create_all()
        from shopcart.models import address as _address_models  # noqa: F401
        from shopcart.models import cart as _cart_models  # noqa: F401
        from shopcart.models import user as _user_models  # noqa: F401

        try:
            SQLModel.metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            raise StorageError(type(exc).__name__) from exc

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Yield a Session bound to this store.

        - Objects stay readable after commit/close (expire_on_commit=False),
          so callers get plain snapshots back.
        - Every commit publishes the tables marked with `mark_changed`.
        - Any SQLAlchemy error is rolled back and re-raised as StorageError.
        """
        session = Session(self.engine, expire_on_commit=False)

        def _after_commit(sess: Session) -> None:
            changed = sess.info.pop(CHANGED_TABLES, set())
            if changed:
                self.notifier.publish(changed)

        def _after_rollback(sess: Session) -> None:
            sess.info.pop(CHANGED_TABLES, None)

        event.listen(session, "after_commit", _after_commit)
        event.listen(session, "after_rollback", _after_rollback)

        try:
            yield session
        except SQLAlchemyError as exc:
            session.rollback()
            logger.error("Store operation failed: %s", exc)
            raise StorageError(type(exc).__name__) from exc
        finally:
            session.close()
