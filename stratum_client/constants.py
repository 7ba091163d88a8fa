"""
Constants for the Stratum API client.
"""

# Form fields sent with every call
FIELD_TIMESTAMP = "api_ts"
FIELD_USER = "api_user"
FIELD_PAYLOAD = "payload"
FIELD_SIGNATURE = "api_sig"

# Default configuration values
DEFAULT_ENDPOINT = "https://stratum.global/api/"
DEFAULT_TRANSPORT_TIMEOUT = 5  # connect timeout in seconds
DEFAULT_CLIENT_TIMEOUT = 10    # call timeout in seconds

DEFAULT_CONFIG = {
    'endpoint': DEFAULT_ENDPOINT,
    'transport_timeout': DEFAULT_TRANSPORT_TIMEOUT,
    'client_timeout': DEFAULT_CLIENT_TIMEOUT,
}

# Envelope messages set by the client itself
MESSAGE_CALL_FAILED = "Call failed"
MESSAGE_DECODE_JSON_FAILED = "Decoding json failed"
MESSAGE_DECODE_BODY_FAILED = "Decoding body failed"
MESSAGE_REQUEST_OK = "Request ok"

# Largest single read while streaming a response body
READ_CHUNK_SIZE = 64 * 1024
