"""
Request signing for the Stratum API.

Parameters are serialized into a canonical ``key=value&...`` string with keys
sorted ascending and the signature field left out, then signed with
HMAC-SHA256 keyed by the API secret.
"""

import hashlib
import hmac
from typing import Mapping, Union

from .constants import FIELD_SIGNATURE
from .exceptions import EmptyParametersError

BytesOrStr = Union[bytes, str]


def _to_bytes(value: BytesOrStr) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode('utf-8')


def canonicalize(params: Mapping[str, BytesOrStr]) -> BytesOrStr:
    """
    Build the canonical string signed for a set of request parameters.

    Values may be opaque bytes. If any value is bytes the canonical form is
    returned as bytes, with text keys and values UTF-8 encoded, so it signs
    identically to the all-text form.

    Args:
        params: Request parameters; an ``api_sig`` entry is ignored

    Returns:
        Sorted ``key=value`` pairs joined with ``&``

    Raises:
        EmptyParametersError: If no parameters remain after excluding the signature
    """
    keys = sorted(key for key in params if key != FIELD_SIGNATURE)
    if not keys:
        raise EmptyParametersError("cannot canonicalize an empty parameter set")
    if any(isinstance(params[key], bytes) for key in keys):
        return b"&".join(_to_bytes(key) + b"=" + _to_bytes(params[key]) for key in keys)
    return "&".join(f"{key}={params[key]}" for key in keys)


def sign(secret: BytesOrStr, canonical: BytesOrStr) -> str:
    """
    Generate an HMAC-SHA256 signature.

    Args:
        secret: HMAC key
        canonical: Canonical string to sign

    Returns:
        Lowercase hex-encoded HMAC signature
    """
    mac = hmac.new(_to_bytes(secret), _to_bytes(canonical), hashlib.sha256)
    return mac.hexdigest()


def sign_params(secret: BytesOrStr, params: Mapping[str, BytesOrStr]) -> str:
    """Sign the canonical form of ``params``."""
    return sign(secret, canonicalize(params))


def verify_params(secret: BytesOrStr, params: Mapping[str, BytesOrStr]) -> bool:
    """
    Verify the ``api_sig`` carried by a set of received parameters.

    This is the check the remote service performs: the signature is
    recomputed over every other field and compared in constant time.

    Args:
        secret: HMAC key
        params: Received form fields, including ``api_sig``

    Returns:
        True if the transmitted signature matches
    """
    signature = params.get(FIELD_SIGNATURE)
    if not signature:
        return False
    try:
        expected = sign_params(secret, params)
    except EmptyParametersError:
        return False
    return hmac.compare_digest(expected.encode('ascii'), _to_bytes(signature))
