"""Export session for the two-stage image export of a concept plan.

The base export rasterizes the mounted drawing once it is ready and hands
the image to the AI collaborator, which returns the rendered architectural
drawing. The interior export is only possible after that: it captures the
same mounted drawing again and hands it to the collaborator for an interior
visualization.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..config import PLAN_ELEMENT_ID, SUPERSAMPLING_FACTOR
from .display import DisplayTree
from .raster import RasterImage, RasterizationError, normalize_format, rasterize

LOGGER = logging.getLogger(__name__)

BASE_FAILURE_MESSAGE = "Failed to generate architectural drawing. Please try resetting."
INTERIOR_FAILURE_MESSAGE = "Failed to generate interior visualization. Please try again."

Collaborator = Callable[[RasterImage], Any]


class ExportUnavailableError(RuntimeError):
    """The interior export was requested before the base export succeeded."""


class ExportStatus(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ExportState:
    """Progress of one export.

    Attributes:
        status: Current status.
        image: The rasterized plan handed to the collaborator.
        result: What the collaborator returned.
        error: Short user-facing message when the export failed.
        cause: Description of the underlying failure.
    """

    status: ExportStatus = ExportStatus.IDLE
    image: Optional[RasterImage] = None
    result: Any = None
    error: Optional[str] = None
    cause: Optional[str] = None

    def reset(self) -> None:
        self.status = ExportStatus.IDLE
        self.image = None
        self.result = None
        self.error = None
        self.cause = None


class ExportSession:
    """Drives the base and interior exports of one mounted drawing.

    Args:
        display: Display tree the drawing is mounted in.
        element_id: Id of the drawing to export.
        image_format: Raster format handed to the collaborator.
        scale: Supersampling factor.
    """

    def __init__(
        self,
        display: DisplayTree,
        element_id: str = PLAN_ELEMENT_ID,
        image_format: str = "jpeg",
        scale: float = SUPERSAMPLING_FACTOR,
    ):
        self.display = display
        self.element_id = element_id
        self.image_format = normalize_format(image_format)
        self.scale = scale
        self.base = ExportState()
        self.interior = ExportState()
        self._started = False

    def start(self, collaborator: Collaborator) -> None:
        """Run the base export as soon as the drawing is mounted.

        Only the first call registers; later attempts go through ``retry_base``.
        """
        if self._started:
            LOGGER.debug("Export of '%s' already started", self.element_id)
            return
        self._started = True
        self.display.when_ready(self.element_id, lambda _drawing: self.export_base(collaborator))

    def export_base(self, collaborator: Collaborator) -> ExportState:
        """Run the base export unless it already ran or is running.

        Returns:
            The base export state.
        """
        if self.base.status in (ExportStatus.RUNNING, ExportStatus.DONE):
            LOGGER.debug("Base export already %s", self.base.status.value)
            return self.base
        return self._run(self.base, collaborator, BASE_FAILURE_MESSAGE)

    def export_interior(self, collaborator: Collaborator) -> ExportState:
        """Run the interior export from the drawing that is mounted now.

        Raises:
            ExportUnavailableError: If the base export has not succeeded.
        """
        if self.base.status is not ExportStatus.DONE:
            raise ExportUnavailableError("The architectural drawing must be generated first")
        if self.interior.status is ExportStatus.RUNNING:
            return self.interior
        return self._run(self.interior, collaborator, INTERIOR_FAILURE_MESSAGE)

    def retry_base(self, collaborator: Collaborator) -> ExportState:
        """Re-run a failed base export."""
        if self.base.status is ExportStatus.FAILED:
            self.base.reset()
        return self.export_base(collaborator)

    def retry_interior(self, collaborator: Collaborator) -> ExportState:
        if self.interior.status is ExportStatus.FAILED:
            self.interior.reset()
        return self.export_interior(collaborator)

    def _run(self, state: ExportState, collaborator: Collaborator, failure_message: str) -> ExportState:
        state.status = ExportStatus.RUNNING
        state.error = None
        state.cause = None

        try:
            source = self.display.capture(self.element_id)
            state.image = rasterize(source, self.image_format, self.scale)
        except RasterizationError as e:
            LOGGER.error("Export of '%s' failed: %s", self.element_id, e)
            self._fail(state, failure_message, e)
            return state

        try:
            state.result = collaborator(state.image)
        except Exception as e:
            LOGGER.error("Collaborator failed for '%s': %s", self.element_id, e)
            self._fail(state, failure_message, e)
            raise

        state.status = ExportStatus.DONE
        return state

    @staticmethod
    def _fail(state: ExportState, message: str, exc: Exception) -> None:
        state.status = ExportStatus.FAILED
        state.error = message
        state.cause = str(exc)
