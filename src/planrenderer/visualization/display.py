"""Display tree holding the drawings currently mounted for export.

Exports never hold a reference to a drawing of their own: they look the
drawing up by element id at capture time, so an export always sees what is
mounted right now. Mounting a drawing fires the readiness callbacks
registered for its id.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from .layers import Drawing
from .raster import CapturedDrawing, MissingRenderSourceError

LOGGER = logging.getLogger(__name__)

ReadyCallback = Callable[[Drawing], None]


class DisplayTree:
    """Registry of mounted drawings, keyed by element id."""

    def __init__(self) -> None:
        self._mounted: Dict[str, Drawing] = {}
        self._waiting: Dict[str, List[ReadyCallback]] = {}

    def mount(self, drawing: Drawing) -> None:
        """Mount a drawing, replacing any drawing with the same id.

        Callbacks waiting for the id are called once, in registration order.
        A failing callback does not stop the ones after it; the first error
        is re-raised once all of them have run.
        """
        self._mounted[drawing.element_id] = drawing
        LOGGER.debug("Mounted drawing '%s'", drawing.element_id)
        errors: List[Exception] = []
        for callback in self._waiting.pop(drawing.element_id, []):
            try:
                callback(drawing)
            except Exception as e:
                LOGGER.error("Ready callback for '%s' failed: %s", drawing.element_id, e)
                errors.append(e)
        if errors:
            raise errors[0]

    def unmount(self, element_id: str) -> None:
        if self._mounted.pop(element_id, None) is not None:
            LOGGER.debug("Unmounted drawing '%s'", element_id)

    def find(self, element_id: str) -> Optional[Drawing]:
        return self._mounted.get(element_id)

    def is_mounted(self, element_id: str) -> bool:
        return element_id in self._mounted

    def when_ready(self, element_id: str, callback: ReadyCallback) -> None:
        """Call ``callback`` once the drawing is mounted (now, if it already is)."""
        drawing = self._mounted.get(element_id)
        if drawing is not None:
            callback(drawing)
        else:
            self._waiting.setdefault(element_id, []).append(callback)

    def capture(self, element_id: str) -> CapturedDrawing:
        """Serialize the mounted drawing.

        Raises:
            MissingRenderSourceError: If no drawing with that id is mounted.
        """
        drawing = self._mounted.get(element_id)
        if drawing is None:
            raise MissingRenderSourceError(f"No drawing mounted with id '{element_id}'")
        return CapturedDrawing.from_drawing(drawing)
