import random
from os import PathLike
from pathlib import Path

import httpx
from pydantic import BaseModel

from meme_relay.shared import Config, Logger, ValidationError

from .cache import cache_encrypted_payload
from .crypto import encrypt_payload
from .download import download_random_meme_image
from .memes import fetch_memes, filter_memes_by_name, read_meme_url
from .report import log_file_locations

logger = Logger(__name__).get_logger()

CACHE_FILE_NAME = "memes.json.enc"


class PipelineResult(BaseModel):
    cache_path: Path
    image_path: Path
    total: int
    matched: int


async def process_memes(
    config: Config,
    client: httpx.AsyncClient,
    directory: PathLike | str,
    key: str | None = None,
    iv: str | None = None,
    keyword: str | None = None,
    rng=random,
) -> PipelineResult:
    """
    Run fetch -> filter -> encrypt -> cache -> download -> log in one go.

    Key and IV default to the ``[crypto]`` config section. Without a keyword
    every meme is kept. Errors from each step propagate unchanged.
    """
    url = read_meme_url(config)
    memes = await fetch_memes(url, client, path=config.upstream.memes_path)

    selected = memes if keyword is None else filter_memes_by_name(memes, keyword)
    logger.info("%s of %s memes selected (keyword: %r)", len(selected), len(memes), keyword)
    if not selected:
        raise ValidationError(f"No memes match keyword {keyword!r}")

    token = encrypt_payload(
        selected,
        key if key is not None else config.crypto.key,
        iv if iv is not None else config.crypto.iv,
    )
    cache_path = cache_encrypted_payload(token, Path(directory) / CACHE_FILE_NAME)
    image_path = await download_random_meme_image(selected, directory, client, rng=rng)

    log_file_locations(cache_path, image_path)

    return PipelineResult(
        cache_path=cache_path,
        image_path=image_path,
        total=len(memes),
        matched=len(selected),
    )
