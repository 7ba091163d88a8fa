"""
Stratum API client.

Every call is a form-encoded POST carrying a timestamp, the API user, the
caller's payload and an HMAC-SHA256 signature over those fields. Responses
are normalized into a ``Result`` envelope whether the call succeeds or not.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, Union

import requests
import urllib3

from . import signer
from .constants import (
    DEFAULT_CONFIG,
    FIELD_PAYLOAD,
    FIELD_SIGNATURE,
    FIELD_TIMESTAMP,
    FIELD_USER,
    MESSAGE_CALL_FAILED,
    MESSAGE_DECODE_BODY_FAILED,
    MESSAGE_DECODE_JSON_FAILED,
    MESSAGE_REQUEST_OK,
    READ_CHUNK_SIZE,
)
from .exceptions import ConfigurationError, DecodeError, TransportError
from .result import Raw, Result, Status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    user: str
    secret: str

    def __repr__(self):
        return f"Credentials(user={self.user!r}, secret='***')"


class StratumClient:
    """
    Client for signed calls to the Stratum API.

    Credentials are fixed at construction; the endpoint and both timeouts
    can be changed afterwards through the setters.
    """

    def __init__(self, user: str, secret: str, **config):
        """
        Initialize Stratum client.

        Args:
            user: API user identifier
            secret: API secret used as HMAC key
            **config: Configuration options (endpoint, transport_timeout, client_timeout)
        """
        if not user:
            raise ConfigurationError("user cannot be empty")
        if not secret:
            raise ConfigurationError("secret cannot be empty")
        self._credentials = Credentials(user, secret)

        # Merge default config with user overrides
        unknown = set(config) - set(DEFAULT_CONFIG)
        if unknown:
            raise ConfigurationError(f"unknown configuration options: {', '.join(sorted(unknown))}")
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

    def _validate_config(self):
        """Validate client configuration."""
        if not self.config['endpoint']:
            raise ConfigurationError("endpoint cannot be empty")

        if self.config['transport_timeout'] <= 0:
            raise ConfigurationError("transport_timeout must be positive")

        if self.config['client_timeout'] <= 0:
            raise ConfigurationError("client_timeout must be positive")

    @property
    def user(self) -> str:
        """API user identifier."""
        return self._credentials.user

    @property
    def endpoint(self) -> str:
        """Base URL that module and action are appended to."""
        return self.config['endpoint']

    @property
    def transport_timeout(self) -> float:
        """Connect timeout, in seconds."""
        return self.config['transport_timeout']

    @property
    def client_timeout(self) -> float:
        """Overall call timeout, in seconds."""
        return self.config['client_timeout']

    def set_endpoint(self, endpoint: str):
        """Set the base URL; it should end with "/"."""
        if not endpoint:
            raise ConfigurationError("endpoint cannot be empty")
        self.config['endpoint'] = endpoint

    def set_transport_timeout(self, timeout: float):
        """Set the connect timeout, in seconds."""
        if timeout <= 0:
            raise ConfigurationError("transport_timeout must be positive")
        self.config['transport_timeout'] = timeout

    def set_client_timeout(self, timeout: float):
        """Set the overall call timeout, in seconds."""
        if timeout <= 0:
            raise ConfigurationError("client_timeout must be positive")
        self.config['client_timeout'] = timeout

    def _build_params(self, payload: Union[bytes, str]) -> Dict[str, Union[bytes, str]]:
        """Assemble the signed form fields for one call; bytes payloads are sent as-is."""
        params = {
            FIELD_TIMESTAMP: str(int(time.time())),
            FIELD_USER: self._credentials.user,
            FIELD_PAYLOAD: payload,
        }
        params[FIELD_SIGNATURE] = signer.sign_params(self._credentials.secret, params)
        return params

    def _url(self, module: str, action: str) -> str:
        # Plain concatenation, the endpoint is expected to end with "/"
        return self.config['endpoint'] + module + "/" + action

    def _read_body(self, response: requests.Response, deadline: float) -> bytes:
        """
        Read the whole response body before ``deadline``.

        Each read returns whatever one socket read delivers, so a slowly
        trickling body is still cut off once the deadline passes.

        Raises:
            requests.Timeout: If the deadline passes before the body is complete
            urllib3.exceptions.HTTPError: If the connection breaks mid-body
        """
        chunks = []
        while True:
            if time.monotonic() >= deadline:
                raise requests.Timeout(
                    f"call exceeded client_timeout of {self.config['client_timeout']}s"
                )
            chunk = response.raw.read1(READ_CHUNK_SIZE, decode_content=True)
            if not chunk:
                return b"".join(chunks)
            chunks.append(chunk)

    def call_rest_api(self, module: str, action: str, payload: Union[bytes, str] = b"",
                      decode: bool = True) -> Result:
        """
        Make a signed call to ``<endpoint><module>/<action>``.

        Args:
            module: API module
            action: Action within the module
            payload: Opaque payload sent as the ``payload`` field
            decode: Decode the body as a JSON envelope; otherwise return it raw

        Returns:
            Result envelope

        Raises:
            TransportError: If the service cannot be reached or the call times out
            DecodeError: If the body cannot be read or decoded
        """
        deadline = time.monotonic() + self.config['client_timeout']
        params = self._build_params(payload)
        url = self._url(module, action)
        timeout = (self.config['transport_timeout'], self.config['client_timeout'])

        logger.debug("POST %s user=%s ts=%s", url, params[FIELD_USER], params[FIELD_TIMESTAMP])

        with requests.Session() as session:
            try:
                response = session.post(url, data=params, timeout=timeout, stream=True)
            except requests.RequestException as e:
                logger.warning("call to %s failed: %s", url, e)
                result = Result.failed(MESSAGE_CALL_FAILED, e)
                raise TransportError(f"HTTP request failed: {e}", result) from e

            with response:
                try:
                    body = self._read_body(response, deadline)
                except (requests.Timeout, urllib3.exceptions.TimeoutError) as e:
                    logger.warning("call to %s timed out: %s", url, e)
                    result = Result.failed(MESSAGE_CALL_FAILED, e)
                    raise TransportError(f"HTTP request timed out: {e}", result) from e
                except urllib3.exceptions.HTTPError as e:
                    logger.warning("reading response from %s failed: %s", url, e)
                    result = Result.failed(MESSAGE_DECODE_BODY_FAILED, e)
                    raise DecodeError(f"reading response body failed: {e}", result) from e

                if not decode:
                    return Result(Status.OK, MESSAGE_REQUEST_OK, "", Raw(body))

                try:
                    return Result.from_json(body)
                except ValueError as e:
                    logger.warning("decoding response from %s failed: %s", url, e)
                    result = Result.failed(MESSAGE_DECODE_JSON_FAILED, e)
                    raise DecodeError(f"decoding json failed: {e}", result) from e
