class PipelineError(Exception):
    """Base exception for batch failures."""


class BatchInputError(PipelineError):
    """Raised when batch input is missing or unreadable."""


class BatchExecutionError(PipelineError):
    """Raised when a batch run fails."""
