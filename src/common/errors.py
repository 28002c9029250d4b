"""Error taxonomy shared by the extraction and generation stages."""


class RepurposeError(Exception):
    """Base class for failures surfaced to the caller."""


class FetchError(RepurposeError):
    """The page could not be fetched (network failure or non-success status)."""


class ExtractionError(RepurposeError):
    """The page was fetched but no usable article text was found."""


class GenerationError(RepurposeError):
    """The model API was unreachable or rejected the request."""
