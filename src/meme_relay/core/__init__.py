# Business logic not tied to API request/response:
# - fetching and filtering the upstream meme list
# - payload encryption
# - writing the cache file and the downloaded image
from .cache import cache_encrypted_payload
from .crypto import decrypt_payload, decrypt_payload_json, encrypt_payload
from .download import IMAGE_FILE_NAME, download_random_meme_image
from .memes import (
    HELPER_MEMES_PATH,
    UPSTREAM_MEMES_PATH,
    count_memes,
    fetch_meme_payload,
    fetch_memes,
    filter_memes_by_name,
    read_meme_url,
)
from .pipeline import CACHE_FILE_NAME, PipelineResult, process_memes
from .report import log_file_locations

__all__ = [
    "CACHE_FILE_NAME",
    "HELPER_MEMES_PATH",
    "IMAGE_FILE_NAME",
    "UPSTREAM_MEMES_PATH",
    "PipelineResult",
    "cache_encrypted_payload",
    "count_memes",
    "decrypt_payload",
    "decrypt_payload_json",
    "download_random_meme_image",
    "encrypt_payload",
    "fetch_meme_payload",
    "fetch_memes",
    "filter_memes_by_name",
    "log_file_locations",
    "process_memes",
    "read_meme_url",
]
