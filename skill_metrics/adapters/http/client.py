"""
Shared HTTP client construction.
One client is built per run and handed to every adapter that talks to the network.
"""

from typing import Optional

import httpx


def create_http_client(timeout: float, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """
    Build the process-wide HTTP client.

    Args:
        timeout: Client-wide timeout in seconds for connect, read, write and pool waits
        transport: Optional transport override, used by tests

    Returns:
        httpx.Client to be used as a context manager by the caller
    """
    return httpx.Client(timeout=httpx.Timeout(timeout), transport=transport)
