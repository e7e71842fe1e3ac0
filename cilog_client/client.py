import logging
from typing import Any

import requests

from cilog_common.exceptions import FetchError

logger = logging.getLogger(__name__)

DEFAULT_RETRIES = 3
DEFAULT_TIMEOUT = 30


def get_json(
    url: str, retries: int = DEFAULT_RETRIES, timeout: float = DEFAULT_TIMEOUT
) -> Any:
    """
    GET a URL and parse the response body as JSON.

    Args:
        url: Full URL of the API endpoint
        retries: Extra attempts made after the first one fails
        timeout: Seconds to wait for each response

    Returns:
        The parsed JSON document

    Raises:
        FetchError: If every attempt failed

    A non-200 status, a network error and a body that is not JSON all
    count the same: the request is retried immediately until the retries
    are used up.
    """
    last_error: Exception | None = None
    attempts = max(retries, 0) + 1

    for attempt in range(1, attempts + 1):
        try:
            response = requests.get(url, timeout=timeout)
        except requests.exceptions.RequestException as e:
            last_error = e
            logger.warning(f"GET {url} failed (attempt {attempt}/{attempts}): {e}")
            continue

        if response.status_code != 200:
            last_error = None
            logger.warning(
                f"GET {url} returned status {response.status_code} "
                f"(attempt {attempt}/{attempts})"
            )
            continue

        # requests' JSONDecodeError subclasses ValueError
        try:
            return response.json()
        except ValueError as e:
            last_error = e
            logger.warning(
                f"GET {url} returned invalid JSON (attempt {attempt}/{attempts}): {e}"
            )

    raise FetchError(url) from last_error
