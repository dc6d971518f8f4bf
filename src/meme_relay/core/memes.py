import json
from collections.abc import Sequence
from typing import Any

import httpx

from meme_relay.models import Meme, meme_field
from meme_relay.shared import (
    Config,
    ConfigurationError,
    Logger,
    NetworkError,
    ParseError,
)

logger = Logger(__name__).get_logger()

# The standalone helpers read the list at the top level of the body,
# the route reads it one level deeper as the live upstream serves it.
HELPER_MEMES_PATH = ("memes",)
UPSTREAM_MEMES_PATH = ("data", "memes")


def read_meme_url(config: Config) -> str:
    """Return the upstream meme-list URL, or raise ConfigurationError."""
    url = (config.upstream.url or "").strip()
    if not url:
        raise ConfigurationError("MEME_URL is not configured")
    return url


async def fetch_meme_payload(url: str, client: httpx.AsyncClient) -> Any:
    """GET the url once and return the decoded JSON body unchanged."""
    if not url:
        raise ConfigurationError("MEME_URL is not configured")

    logger.debug("Fetching meme list from %s", url)
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("Upstream returned %s for %s", e.response.status_code, url)
        raise NetworkError(
            f"Upstream returned status {e.response.status_code}"
        ) from e
    except httpx.HTTPError as e:
        logger.warning("Upstream request to %s failed: %s", url, e)
        raise NetworkError(f"Upstream request failed: {e}") from e

    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Upstream body is not valid JSON: {e}") from e


async def fetch_memes(
    url: str,
    client: httpx.AsyncClient,
    path: Sequence[str] = HELPER_MEMES_PATH,
    require_list: bool = True,
) -> Any:
    """Fetch the payload and return the meme list found at ``path``.

    With ``require_list=False`` the value at ``path`` is returned whatever
    its shape; only a missing field is an error.
    """
    node = await fetch_meme_payload(url, client)

    for key in path:
        if not isinstance(node, dict) or key not in node:
            raise ParseError(f"Upstream body has no '{'.'.join(path)}' field")
        node = node[key]

    if isinstance(node, list):
        logger.info("Fetched %s memes", len(node))
    elif require_list:
        raise ParseError(f"Upstream '{'.'.join(path)}' field is not a list")

    return node


def filter_memes_by_name(
    memes: Sequence[Meme | dict[str, Any]], keyword: str
) -> list:
    """Keep the memes whose name contains ``keyword``, ignoring case."""
    needle = keyword.lower()
    return [
        meme
        for meme in memes
        if needle in str(meme_field(meme, "name") or "").lower()
    ]


def count_memes(
    memes: Sequence[Meme | dict[str, Any]], keyword: str | None = None
) -> int:
    if keyword is None:
        return len(memes)
    return len(filter_memes_by_name(memes, keyword))
