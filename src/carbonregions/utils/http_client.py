import logging

import httpx

from ..core.config import config

logger = logging.getLogger(__name__)


def get_http_client(
    connect_timeout: float = None,
    read_timeout: float = None,
) -> httpx.Client:
    """
    Returns a configured httpx.Client with:
    - Default timeouts (connect and read).
    - Standard User-Agent header (the public geocoder rejects anonymous clients).
    """
    c_timeout = connect_timeout if connect_timeout is not None else config.DEFAULT_TIMEOUT_CONNECT
    r_timeout = read_timeout if read_timeout is not None else config.DEFAULT_TIMEOUT_READ

    timeout = httpx.Timeout(r_timeout, connect=c_timeout)

    headers = {"User-Agent": config.USER_AGENT}

    # No retries: the first transport failure aborts the run.
    logger.debug("Creating HTTP client (connect=%ss, read=%ss)", c_timeout, r_timeout)

    return httpx.Client(
        timeout=timeout,
        headers=headers,
        follow_redirects=True,
    )
