import logging

import httpx

from ..core.config import ReportSettings

logger = logging.getLogger(__name__)


def get_async_http_client(settings: ReportSettings) -> httpx.AsyncClient:
    """
    Returns a configured httpx.AsyncClient with:
    - The request timeout from the settings.
    - The client identity as User-Agent header.
    - gzip compressed responses accepted.
    """
    timeout = httpx.Timeout(settings.timeout_seconds)

    headers = {
        "User-Agent": settings.user_agent,
        "Accept-Encoding": "gzip",
    }

    # No retries: a failed fetch aborts the run.
    logger.debug("Creating HTTP client with timeout=%ss", settings.timeout_seconds)

    return httpx.AsyncClient(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
    )
