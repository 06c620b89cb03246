"""Error kinds raised by the scrape pipeline and the record store."""


class JobTrackerError(Exception):
    """Base class for all Job Tracker AI errors."""


class InvalidInputError(JobTrackerError):
    """Request rejected before the pipeline runs (empty or malformed URL)."""


class FetchError(JobTrackerError):
    """All page retrieval attempts failed; message carries the last cause."""


class InferenceError(JobTrackerError):
    """Language model call failed or returned no content."""


class ResponseValidationError(JobTrackerError):
    """Model output is not a JSON object matching the extraction schema."""


class RecordNotFoundError(JobTrackerError):
    """Record does not exist or belongs to another user."""


class AuthenticationError(JobTrackerError):
    """No authenticated user on the request."""
