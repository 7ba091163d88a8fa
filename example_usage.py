#!/usr/bin/env python3
"""
Basic usage examples for the Stratum API client library.

This script demonstrates how to sign parameters and make authenticated
calls to a Stratum API endpoint.
"""

import json
import logging
import sys

from stratum_client import CallError, StratumClient, canonicalize, sign


def main():
    """Run basic usage examples."""

    # Server configuration
    user = "client1"
    endpoint = "http://localhost:8080/api/"
    secret = "python-client-demo-secret"

    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    print("=== Stratum Client Basic Usage Examples ===\n")

    # Example 1: Signing parameters by hand
    print("1. Signing parameters...")
    params = {"api_ts": "1000", "api_user": "alice", "payload": "x"}
    canonical = canonicalize(params)
    print(f"   Canonical: {canonical}")
    print(f"   Signature: {sign('s3cret', canonical)}\n")

    # Example 2: Decoded call
    print("2. Calling account/balance...")
    client = StratumClient(user, secret, endpoint=endpoint, transport_timeout=2, client_timeout=5)
    payload = json.dumps({"coin": "btc"}).encode("utf-8")
    try:
        result = client.call_rest_api("account", "balance", payload)
        print(f"   Status: {result.status.value} ({result.message}, code {result.code!r})")
        print(f"   Data: {result.data}\n")
    except CallError as e:
        print(f"   ✗ {e.result.message}: {e.result.data}\n")

    # Example 3: Raw call
    print("3. Calling files/download without decoding...")
    try:
        result = client.call_rest_api("files", "download", b"report.csv", decode=False)
        print(f"   ✓ Received {len(result.raw)} bytes\n")
    except CallError as e:
        print(f"   ✗ {e.result.message}: {e.result.data}\n")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
