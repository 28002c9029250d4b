import logging

import requests

from common.errors import FetchError
from extract_article.models import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


def build_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    """Build a reusable HTTP session that identifies as a desktop browser."""
    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.8",
        }
    )
    return session


def fetch_page(
    url: str,
    session: requests.Session,
    timeout: float | None = 30,
) -> str | bytes:
    """
    Fetch raw HTML for a URL.

    Returns decoded text when the server declares a charset, otherwise the
    raw bytes so the parser can honour the page's own <meta charset>.
    Any transport failure or non-2xx status is raised as FetchError.
    """
    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.warning("Fetch failed for %s: %s", url, e)
        raise FetchError(f"Failed to extract content from URL: {e}") from e

    content_type = response.headers.get("Content-Type", "")
    if "charset=" in content_type.lower():
        return response.text

    # requests would fall back to ISO-8859-1 for text/* here
    return response.content
