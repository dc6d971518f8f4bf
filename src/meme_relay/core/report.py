from os import PathLike

from meme_relay.shared import Logger

logger = Logger(__name__).get_logger()


def log_file_locations(
    encrypted_json_path: PathLike | str, image_path: PathLike | str
) -> None:
    logger.info("Encrypted meme JSON file location: %s", encrypted_json_path)
    logger.info("Meme image file location: %s", image_path)
