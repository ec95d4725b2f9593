"""HTTP GET returning the response body as text."""

import httpx

from jslib.errors import Network
from jslib.logging_config import get_logger
from jslib.result import Err, Ok, Result

log = get_logger(__name__)


def _make_client() -> httpx.AsyncClient:
    """Create a fresh client that follows redirects with the default timeout."""
    return httpx.AsyncClient(follow_redirects=True)


async def fetch(url: str) -> Result[str]:
    """Fetch data from a url.

    NOTE: This makes a single HTTP GET request. Any status the transport
    completes is a success, including 4xx and 5xx responses.

    Args:
        url: The URL to request.

    Returns:
        Ok(body) with the decoded response text, or Err(Network) if the
        request fails or the body cannot be read.
    """
    log.debug("fetch_started", url=url)

    try:
        async with _make_client() as client:
            response = await client.get(url)
            text = response.text
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        return Err(Network(e))

    log.debug(
        "fetch_completed",
        url=url,
        status_code=response.status_code,
        length=len(text),
    )
    return Ok(text)
