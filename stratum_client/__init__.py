"""
Stratum API Client

A Python client library that sends HMAC-signed, form-encoded calls to the
Stratum API and normalizes every response into a uniform result envelope.

Example usage:
    from stratum_client import StratumClient

    client = StratumClient("your-user", "your-secret")
    result = client.call_rest_api("account", "balance", b'{"coin": "btc"}')
"""

from .client import StratumClient, Credentials
from .exceptions import (
    StratumClientError,
    ConfigurationError,
    SignatureError,
    EmptyParametersError,
    CallError,
    TransportError,
    DecodeError
)
from .result import Status, Result, Decoded, Raw
from .signer import canonicalize, sign, sign_params, verify_params
from .constants import (
    DEFAULT_CONFIG,
    DEFAULT_ENDPOINT,
    DEFAULT_TRANSPORT_TIMEOUT,
    DEFAULT_CLIENT_TIMEOUT
)

__version__ = "1.0.0"
__all__ = [
    "StratumClient",
    "Credentials",
    "StratumClientError",
    "ConfigurationError",
    "SignatureError",
    "EmptyParametersError",
    "CallError",
    "TransportError",
    "DecodeError",
    "Status",
    "Result",
    "Decoded",
    "Raw",
    "canonicalize",
    "sign",
    "sign_params",
    "verify_params",
    "DEFAULT_CONFIG",
    "DEFAULT_ENDPOINT",
    "DEFAULT_TRANSPORT_TIMEOUT",
    "DEFAULT_CLIENT_TIMEOUT"
]
