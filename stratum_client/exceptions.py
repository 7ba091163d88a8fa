"""
Custom exceptions for the Stratum API client.
"""


class StratumClientError(Exception):
    """Base exception for Stratum client errors."""
    pass


class ConfigurationError(StratumClientError):
    """Raised when client configuration is invalid."""
    pass


class SignatureError(StratumClientError):
    """Raised when request parameters cannot be signed."""
    pass


class EmptyParametersError(SignatureError):
    """Raised when there is nothing left to canonicalize."""
    pass


class CallError(StratumClientError):
    """
    Raised when an API call fails.

    The failed envelope is always attached as ``result`` so callers can
    branch on its status without parsing the error text.
    """

    def __init__(self, message, result):
        super().__init__(message)
        self.result = result


class TransportError(CallError):
    """Raised when the remote service cannot be reached."""
    pass


class DecodeError(CallError):
    """Raised when a response body cannot be read or decoded."""
    pass
