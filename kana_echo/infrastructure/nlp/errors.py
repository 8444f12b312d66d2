"""Exceptions raised by the COTOHA API clients."""


class NlpServiceError(Exception):
    """Base exception for NLP service errors."""
    pass


class TokenAcquisitionError(NlpServiceError):
    """Raised when the OAuth endpoint does not hand out an access token."""
    pass


class ParseRequestError(NlpServiceError):
    """Raised when the parse endpoint fails or answers with an error status."""
    pass
