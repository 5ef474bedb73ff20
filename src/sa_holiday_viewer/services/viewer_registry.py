"""
sa_holiday_viewer.services.viewer_registry

In-memory registry of live viewer sessions.

Responsibilities:
- Create, look up and dispose `HolidayViewer` instances by id.
- Bound the number of live sessions; the oldest is disposed on overflow.
"""

from __future__ import annotations

import uuid

from sa_holiday_viewer.collaborators.models import SearchBackend
from sa_holiday_viewer.observability.logging import get_logger
from sa_holiday_viewer.viewer import HolidayViewer

log = get_logger(__name__)


class ViewerNotFound(LookupError):
    pass


class ViewerRegistry:
    def __init__(self, *, backend: SearchBackend, max_viewers: int) -> None:
        self._backend = backend
        self._max_viewers = max_viewers
        # dicts preserve insertion order, so the first key is the oldest session.
        self._viewers: dict[uuid.UUID, HolidayViewer] = {}

    def __len__(self) -> int:
        return len(self._viewers)

    def create(self) -> HolidayViewer:
        while len(self._viewers) >= self._max_viewers:
            oldest_id = next(iter(self._viewers))
            log.info("viewer_evicted", viewer_id=str(oldest_id))
            self.dispose(oldest_id)

        viewer = HolidayViewer(self._backend)
        self._viewers[viewer.viewer_id] = viewer
        return viewer

    def get(self, viewer_id: uuid.UUID) -> HolidayViewer:
        viewer = self._viewers.get(viewer_id)
        if viewer is None:
            raise ViewerNotFound(str(viewer_id))
        return viewer

    def dispose(self, viewer_id: uuid.UUID) -> None:
        viewer = self._viewers.pop(viewer_id, None)
        if viewer is None:
            raise ViewerNotFound(str(viewer_id))
        viewer.dispose()

    def dispose_all(self) -> None:
        for viewer in self._viewers.values():
            viewer.dispose()
        self._viewers.clear()
