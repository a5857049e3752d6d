# src/blood_analyzer/extractors/ocr_source.py
"""
OCR Collaborator Boundary

The OCR engine itself lives outside this package. It hands us recognized
text (plus, optionally, the image it read) and reports progress while it
works. These types describe that handoff.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional, Union
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OCRResult:
    """Result from the OCR collaborator."""
    text: str
    image_data: str = ""   # e.g. a data URI of the source image, or empty


@dataclass(frozen=True)
class OCRProgress:
    """A progress notification, percent in 0-100."""
    status: str
    percent: int


ProgressListener = Callable[[OCRProgress], None]

# Collaborator signature: called with a progress callback, resolves to the
# recognized text or an OCRResult
OCRRecognizer = Callable[[Callable[..., None]], Awaitable[Union[str, OCRResult]]]


class OCRProgressTracker:
    """
    Normalizes collaborator progress into integer percent events.

    Engines report either a 0-1 fraction or a 0-100 percent; both are
    accepted. Reported progress is clamped to 0-100 and never goes
    backwards within one job.
    """

    def __init__(self, listeners: Optional[List[ProgressListener]] = None):
        self.listeners: List[ProgressListener] = list(listeners or [])
        self.percent = 0
        self.status = "pending"

    def __call__(self, progress: float, status: str = "recognizing text"):
        self.update(progress, status)

    def update(self, progress: float, status: str = "recognizing text") -> OCRProgress:
        try:
            value = float(progress)
        except (TypeError, ValueError):
            logger.debug(f"Ignoring non-numeric OCR progress {progress!r}")
            return OCRProgress(self.status, self.percent)

        if value != value:  # NaN
            return OCRProgress(self.status, self.percent)

        # A fraction in [0, 1] (1.0 means done); larger numbers are percents
        percent = value * 100 if 0.0 <= value <= 1.0 else value
        percent = int(round(max(0.0, min(100.0, percent))))

        self.percent = max(self.percent, percent)
        self.status = status
        event = OCRProgress(status=status, percent=self.percent)
        for listener in self.listeners:
            listener(event)
        return event

    def complete(self) -> OCRProgress:
        return self.update(100, "done")
