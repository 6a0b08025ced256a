from __future__ import annotations

import threading
import time
import uuid
from collections import OrderedDict
from typing import Any, Callable, Mapping, Optional

from .common.logger import get_logger
from .core.constants import DEFAULT_MAX_OPEN_VIEWS, DEFAULT_VIEW_IDLE_SECONDS
from .core.exceptions import RecordNotFoundError

logger = get_logger(__name__)

PageFactory = Callable[["Workspace"], Any]


class Workspace:
    """Pages of one client view.

    A page is constructed the first time it is entered and dropped again on
    ``exit``; its records never outlive it. A page built on top of another
    one (job titles on departments) is dropped together with it.
    """

    def __init__(self, factories: Mapping[str, PageFactory]):
        self._factories = dict(factories)
        self._pages: dict[str, Any] = {}
        self._building: list[str] = []
        self._dependents: dict[str, set[str]] = {}

    def page(self, name: str) -> Any:
        if name not in self._factories:
            raise RecordNotFoundError(f"Unknown page {name}")
        if self._building:
            self._dependents.setdefault(name, set()).add(self._building[-1])
        if name not in self._pages:
            self._building.append(name)
            try:
                self._pages[name] = self._factories[name](self)
            finally:
                self._building.pop()
            logger.debug("entered page %s", name)
        return self._pages[name]

    def is_open(self, name: str) -> bool:
        return name in self._pages

    def exit(self, name: str) -> bool:
        page = self._pages.pop(name, None)
        if page is None:
            return False
        on_exit = getattr(page, "on_exit", None)
        if callable(on_exit):
            on_exit()
        for dependent in sorted(self._dependents.pop(name, ())):
            self.exit(dependent)
        logger.debug("exited page %s", name)
        return True


class ViewRegistry:
    """Workspaces keyed by the view id kept in the client's Flask session.

    Views untouched for ``idle_seconds`` are evicted on the next ``open``;
    beyond ``max_views`` the least recently used view goes first.
    """

    def __init__(
        self,
        factories: Mapping[str, PageFactory],
        *,
        idle_seconds: float = DEFAULT_VIEW_IDLE_SECONDS,
        max_views: int = DEFAULT_MAX_OPEN_VIEWS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._factories = dict(factories)
        self._views: OrderedDict[str, tuple[Workspace, float]] = OrderedDict()
        self._lock = threading.Lock()
        self._idle_seconds = idle_seconds
        self._max_views = max(int(max_views), 1)
        self._clock = clock

    @property
    def page_names(self) -> list[str]:
        return list(self._factories)

    def __len__(self) -> int:
        return len(self._views)

    def open(self, view_id: Optional[str] = None) -> tuple[str, Workspace]:
        with self._lock:
            now = self._clock()
            self._sweep(now)
            if view_id and view_id in self._views:
                workspace, _ = self._views[view_id]
                self._views[view_id] = (workspace, now)
                self._views.move_to_end(view_id)
                return view_id, workspace

            view_id = uuid.uuid4().hex
            workspace = Workspace(self._factories)
            self._views[view_id] = (workspace, now)
            while len(self._views) > self._max_views:
                oldest, _ = self._views.popitem(last=False)
                logger.warning("evicted view %s, %d views open", oldest, self._max_views)
            logger.info("opened view %s", view_id)
            return view_id, workspace

    def _sweep(self, now: float) -> None:
        # Oldest access first, so stop at the first view still in use.
        while self._views:
            view_id, (_, last_seen) = next(iter(self._views.items()))
            if now - last_seen < self._idle_seconds:
                break
            del self._views[view_id]
            logger.info("expired idle view %s", view_id)

    def get(self, view_id: str) -> Optional[Workspace]:
        entry = self._views.get(view_id)
        return entry[0] if entry else None

    def close(self, view_id: str) -> bool:
        with self._lock:
            closed = self._views.pop(view_id, None) is not None
        if closed:
            logger.info("closed view %s", view_id)
        return closed
