class SummaryError(RuntimeError):
    """Base class for failures raised while producing a summary."""


class GenerationInProgressError(SummaryError):
    """Another SOAP generation is still running on the same generator."""


class EmptyTranscriptError(SummaryError, ValueError):
    """The transcript is missing or has no segments."""


class UpstreamError(SummaryError):
    """The generation service answered with an error or could not be reached."""


class EmptyGenerationError(SummaryError):
    """The generation service answered successfully but produced no text."""


__all__ = [
    "SummaryError",
    "GenerationInProgressError",
    "EmptyTranscriptError",
    "UpstreamError",
    "EmptyGenerationError",
]
