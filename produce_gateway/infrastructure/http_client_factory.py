"""HTTP client factory for connection pooling."""
import httpx
from typing import Optional


def create_http_client(timeout_seconds: Optional[float] = None) -> httpx.AsyncClient:
    """
    Build a pooled async client for outbound image fetches and Gemini calls.

    One client is created per application lifespan, so each app uses the
    timeout from its own settings.

    Args:
        timeout_seconds: Per-request timeout; None disables timeouts entirely

    Returns:
        New AsyncClient instance
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        limits=httpx.Limits(
            max_keepalive_connections=20,
            max_connections=100,
            keepalive_expiry=30.0,
        ),
        follow_redirects=True,
        http2=True,
    )
