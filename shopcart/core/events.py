# shopcart/core/events.py
"""
Change notifications for the embedded store.

Writers publish the names of the tables they touched once their
transaction has committed. Readers hold a LiveQuery, which re-runs its
loader and pushes a fresh snapshot to the callback every time one of
those tables changes.

Usage:

    stream = facade.get_cart_lines()
    sub = stream.subscribe(lambda lines: render(lines))
    ...
    sub.close()
"""
import logging
import threading
from collections import defaultdict
from typing import Any, Callable, Generic, Iterable, TypeVar

from sqlmodel import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Subscription:
    """Handle returned by ChangeNotifier.subscribe(); close() detaches it."""

    def __init__(
        self,
        notifier: "ChangeNotifier",
        table: str,
        callback: Callable[[], None],
    ):
        self.notifier = notifier
        self.table = table
        self.callback = callback
        self.active = True

    def close(self) -> None:
        if self.active:
            self.active = False
            self.notifier.unsubscribe(self)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class ChangeNotifier:
    """
    Table-keyed publish/subscribe registry.

    The lock only guards the registry; callbacks run outside of it so a
    subscriber can close itself (or others) from inside a callback.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._subscribers: dict[str, list[Subscription]] = defaultdict(list)

    def subscribe(self, table: str, callback: Callable[[], None]) -> Subscription:
        sub = Subscription(self, table, callback)
        with self._lock:
            self._subscribers[table].append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            subs = self._subscribers.get(sub.table, [])
            if sub in subs:
                subs.remove(sub)

    def subscriber_count(self, table: str) -> int:
        with self._lock:
            return len(self._subscribers.get(table, []))

    def publish(self, tables: Iterable[str]) -> None:
        """Notify every subscriber of the given tables, once each."""
        with self._lock:
            targets: list[Subscription] = []
            for table in sorted(set(tables)):
                targets.extend(self._subscribers.get(table, []))

        for sub in targets:
            if not sub.active:
                continue
            try:
                sub.callback()
            except Exception:
                # A broken subscriber must not fail the write that triggered it
                logger.exception("Change subscriber for %r failed", sub.table)


class LiveQuery(Generic[T]):
    """
    A read that can be observed.

    `get()` returns the current snapshot. `subscribe(cb)` calls `cb` with the
    current snapshot right away and again after every committed write to
    `table`.
    """

    def __init__(self, db: Any, table: str, loader: Callable[[Session], T]):
        self.db = db
        self.table = table
        self.loader = loader

    def get(self) -> T:
        with self.db.session() as session:
            return self.loader(session)

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        # Register first so a write racing with the initial read is not lost
        sub = self.db.notifier.subscribe(self.table, lambda: callback(self.get()))
        callback(self.get())
        return sub
