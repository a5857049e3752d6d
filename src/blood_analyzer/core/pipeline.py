# ============================================================================
# src/blood_analyzer/core/pipeline.py
# ============================================================================
"""
Extraction Pipeline

One extraction cycle for a session:

    OCR text → Normalize → Extract markers → Replace session snapshot
             → Write session store entries

A failed OCR step leaves the session exactly as it was. There is no retry;
the caller decides whether to try again.
"""

import asyncio
import logging
from typing import Dict, List, Optional, Union

from ..extractors.marker_extractor import MarkerExtractor
from ..extractors.ocr_source import (
    OCRProgressTracker,
    OCRRecognizer,
    OCRResult,
    ProgressListener,
)
from ..utils.exceptions import OCRFailureError
from ..utils.logging import log_performance
from ..utils.text_normalizer import normalize
from .context.session_context import SessionContext

logger = logging.getLogger(__name__)


class ExtractionPipeline:
    """Runs OCR output through normalization and extraction for one session."""

    def __init__(self, context: SessionContext, extractor: Optional[MarkerExtractor] = None):
        self.context = context
        self.extractor = extractor or MarkerExtractor()

    @log_performance(logger, "Extraction cycle")
    def process(self, ocr_result: Union[OCRResult, str]) -> Dict[str, str]:
        """
        Process recognized text.

        Args:
            ocr_result: OCRResult or the bare recognized text

        Returns:
            The extracted data now current for the session

        Raises:
            OCRFailureError: text missing, not a string, or blank
        """
        if isinstance(ocr_result, OCRResult):
            text, image_data = ocr_result.text, ocr_result.image_data
        else:
            text, image_data = ocr_result, ""

        if not isinstance(text, str):
            raise OCRFailureError(f"OCR returned {type(text).__name__} instead of text")
        if not text.strip():
            raise OCRFailureError("OCR returned no text")

        normalized = normalize(text)
        extracted = self.extractor.extract(normalized)

        self.context.replace_extraction(
            normalized_text=normalized,
            extracted=extracted,
            image_data=image_data,
        )

        self.context.log_for(logger).info(
            f"Extraction {self.context.extraction_id} found {len(extracted)} fields"
        )
        return dict(self.context.extracted)

    async def run(
        self,
        recognize: OCRRecognizer,
        listeners: Optional[List[ProgressListener]] = None
    ) -> Dict[str, str]:
        """
        Await the OCR collaborator, then process its output.

        Args:
            recognize: Coroutine function taking a progress callback
            listeners: Receive OCRProgress events while OCR runs

        Raises:
            OCRFailureError: the collaborator raised or returned unusable text
        """
        tracker = OCRProgressTracker(listeners)

        try:
            result = await recognize(tracker)
        except asyncio.CancelledError:
            raise
        except OCRFailureError:
            raise
        except Exception as e:
            self.context.log_for(logger).error(f"OCR failed: {e}")
            raise OCRFailureError(f"OCR failed: {e}") from e

        tracker.complete()
        return self.process(result)
