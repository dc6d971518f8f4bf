from os import PathLike
from pathlib import Path

from meme_relay.shared import Logger, StorageError

logger = Logger(__name__).get_logger()


def cache_encrypted_payload(payload: str, file_path: PathLike | str) -> Path:
    """Write ``payload`` as the whole content of ``file_path``.

    The file is created or truncated, never appended to. The parent directory
    must already exist.
    """
    path = Path(file_path)
    try:
        with path.open("w", encoding="utf-8") as f:
            f.write(payload)
    except OSError as e:
        logger.error("Failed to write cache file %s: %s", path, e)
        raise StorageError(f"Failed to write cache file {path}: {e}") from e

    logger.info("Cached %s characters to: %s", len(payload), path)
    return path
