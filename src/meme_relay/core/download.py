import os
import random
import tempfile
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import IO, Any

import httpx

from meme_relay.models import Meme, meme_field
from meme_relay.shared import (
    Logger,
    MemeRelayError,
    NetworkError,
    StorageError,
    ValidationError,
)

logger = Logger(__name__).get_logger()

IMAGE_FILE_NAME = "random_meme.jpg"


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


async def _stream_to_file(client: httpx.AsyncClient, url: str, f: IO[bytes]) -> int:
    written = 0
    try:
        async with client.stream("GET", url) as response:
            response.raise_for_status()
            async for chunk in response.aiter_bytes():
                f.write(chunk)
                written += len(chunk)
    except httpx.HTTPStatusError as e:
        raise NetworkError(
            f"Image request returned status {e.response.status_code}"
        ) from e
    except httpx.HTTPError as e:
        raise NetworkError(f"Image request failed: {e}") from e
    return written


async def download_random_meme_image(
    memes: Sequence[Meme | dict[str, Any]],
    directory: PathLike | str,
    client: httpx.AsyncClient,
    rng=random,
) -> Path:
    """
    Pick one meme uniformly at random and stream its image into
    ``<directory>/random_meme.jpg``.

    The body is written to a temporary file next to the target, synced and
    renamed into place, so ``random_meme.jpg`` is either the complete image or
    left as it was. A failed download leaves no temporary file behind.
    """
    if not memes:
        raise ValidationError("No memes found in the response")

    target_dir = Path(directory)
    if not target_dir.is_dir():
        raise StorageError(f"Download directory does not exist: {target_dir}")

    meme = memes[rng.randrange(len(memes))]
    image_url = meme_field(meme, "url")
    if not image_url:
        raise ValidationError(f"Meme {meme_field(meme, 'id')} has no image url")

    image_path = target_dir / IMAGE_FILE_NAME
    logger.debug("Downloading meme %s from %s", meme_field(meme, "id"), image_url)

    try:
        tmp = tempfile.NamedTemporaryFile(
            dir=target_dir, prefix=".random_meme-", suffix=".part", delete=False
        )
    except OSError as e:
        raise StorageError(f"Cannot write to {target_dir}: {e}") from e

    tmp_path = Path(tmp.name)
    completed = False
    try:
        with tmp:
            written = await _stream_to_file(client, image_url, tmp)
            tmp.flush()
            os.fsync(tmp.fileno())

        if written == 0:
            raise NetworkError("Failed to download meme image: empty body")

        # NamedTemporaryFile creates 0600; give the image the usual umask mode
        os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, image_path)
        completed = True
    except MemeRelayError:
        raise
    except OSError as e:
        raise StorageError(f"Failed to write {image_path}: {e}") from e
    finally:
        if not completed:
            tmp_path.unlink(missing_ok=True)

    logger.info("Saved %s bytes to: %s", written, image_path)
    return image_path
