import logging

import httpx
import pytest

from conftest import IV, KEY, MEME_URL, RecordingTransport
from meme_relay.core import (
    CACHE_FILE_NAME,
    IMAGE_FILE_NAME,
    decrypt_payload_json,
    process_memes,
)
from meme_relay.shared import ConfigurationError, ValidationError

MEMES = [
    {"id": "1", "name": "The Meme 1", "url": "https://i.imgflip.com/30b1gx.jpg"},
    {"id": "2", "name": "Meme 2", "url": "https://i.imgflip.com/1g8my4.jpg"},
    {"id": "3", "name": "Another Meme", "url": "https://i.imgflip.com/1ur9b0.jpg"},
    {"id": "4", "name": "The Last Meme", "url": "https://i.imgflip.com/1bij.jpg"},
]

IMAGE_BYTES = b"\xff\xd8\xff\xe0 fake jpeg"


def upstream(request: httpx.Request) -> httpx.Response:
    if str(request.url) == MEME_URL:
        return httpx.Response(200, json={"success": True, "data": {"memes": MEMES}})
    return httpx.Response(200, content=IMAGE_BYTES)


@pytest.mark.asyncio
async def test_process_memes(config, tmp_path, caplog):
    transport = RecordingTransport(upstream)

    with caplog.at_level(logging.INFO, logger="meme_relay.core.report"):
        async with httpx.AsyncClient(transport=transport) as client:
            result = await process_memes(
                config, client, tmp_path, key=KEY, iv=IV, keyword="The "
            )

    assert result.total == 4
    assert result.matched == 2
    assert result.cache_path == tmp_path / CACHE_FILE_NAME
    assert result.image_path == tmp_path / IMAGE_FILE_NAME
    assert sorted(p.name for p in tmp_path.iterdir()) == sorted(
        [CACHE_FILE_NAME, IMAGE_FILE_NAME]
    )

    cached = decrypt_payload_json(result.cache_path.read_text(), KEY, IV)
    assert cached == [MEMES[0], MEMES[3]]
    assert result.image_path.read_bytes() == IMAGE_BYTES
    assert str(transport.requests[1].url) in {MEMES[0]["url"], MEMES[3]["url"]}

    assert f"Encrypted meme JSON file location: {result.cache_path}" in caplog.messages
    assert f"Meme image file location: {result.image_path}" in caplog.messages


@pytest.mark.asyncio
async def test_process_memes_uses_configured_key(config, tmp_path):
    async with httpx.AsyncClient(transport=RecordingTransport(upstream)) as client:
        result = await process_memes(config, client, tmp_path)

    assert result.matched == result.total == 4
    cached = decrypt_payload_json(
        result.cache_path.read_text(), config.crypto.key, config.crypto.iv
    )
    assert cached == MEMES


@pytest.mark.asyncio
async def test_process_memes_no_match(config, tmp_path):
    transport = RecordingTransport(upstream)

    async with httpx.AsyncClient(transport=transport) as client:
        with pytest.raises(ValidationError):
            await process_memes(config, client, tmp_path, key=KEY, iv=IV, keyword="cat")

    assert list(tmp_path.iterdir()) == []
    assert len(transport.requests) == 1


@pytest.mark.asyncio
async def test_missing_url_fails_before_any_request(unconfigured, tmp_path):
    transport = RecordingTransport(upstream)

    async with httpx.AsyncClient(transport=transport) as client:
        with pytest.raises(ConfigurationError):
            await process_memes(unconfigured, client, tmp_path, key=KEY, iv=IV)

    assert transport.requests == []
    assert list(tmp_path.iterdir()) == []
