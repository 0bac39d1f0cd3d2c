"""Failures raised while refreshing gauge readings.

Every failure carries a human-readable ``message`` that the API returns as is.
Per-row formatting problems are not errors; the decoder degrades those rows.
"""

from __future__ import annotations


class PipelineError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FetchFailure(PipelineError):
    """The rainfall page could not be retrieved."""


class ParseFailure(PipelineError):
    """The rainfall table is missing from the retrieved page."""


class DecodeFailure(PipelineError):
    """The extracted rows could not be decoded as a whole."""
