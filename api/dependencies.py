from functools import lru_cache
import hashlib
import hmac
import logging

from fastapi import HTTPException, Request

from common.config import get_settings
from common.github_client import GitHubClient

logger = logging.getLogger(__name__)


@lru_cache
def get_github_client() -> GitHubClient:
    """Shared GitHub App client, so installation tokens are cached across requests."""
    return GitHubClient()


def verify_github_signature(body: bytes, signature: str, secret: str) -> None:
    """
    Verify a GitHub webhook HMAC-SHA256 signature.

    Raises:
        ValueError: if the signature header is missing, malformed or wrong
    """
    if not signature:
        raise ValueError("Missing X-Hub-Signature-256 header - ensure webhook secret is configured")

    if not signature.startswith("sha256="):
        raise ValueError("Invalid signature format - expected sha256= prefix")

    expected = "sha256=" + hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()

    if not hmac.compare_digest(signature, expected):
        raise ValueError("GitHub webhook signature verification failed")


async def verified_webhook_body(request: Request) -> bytes:
    """Return the raw webhook body, rejecting it with 401 if the signature does not match."""
    body = await request.body()
    secret = get_settings().github_webhook_secret
    if not secret:
        return body

    try:
        verify_github_signature(body, request.headers.get("X-Hub-Signature-256", ""), secret)
    except ValueError as e:
        logger.warning("Rejected GitHub webhook: %s", e)
        raise HTTPException(status_code=401, detail="Invalid webhook signature")
    return body
