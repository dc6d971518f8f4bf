from collections.abc import AsyncIterator
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from meme_relay.core import UPSTREAM_MEMES_PATH, fetch_memes, read_meme_url
from meme_relay.shared import Config, Logger
from meme_relay.shared.http import server_error_handler

logger = Logger(__name__).get_logger()

router = APIRouter()


def get_config(request: Request) -> Config:
    return request.app.state.config


async def get_http_client(
    config: Annotated[Config, Depends(get_config)],
) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=config.upstream.timeout) as client:
        yield client


@router.get("/memes")
async def list_memes(
    config: Annotated[Config, Depends(get_config)],
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
):
    """
    Relay the upstream meme list.

    Responds 200 with whatever ``data.memes`` holds in the upstream body,
    or 500 with a generic message on any failure.
    """
    with server_error_handler():
        url = read_meme_url(config)
        memes = await fetch_memes(
            url, client, path=UPSTREAM_MEMES_PATH, require_list=False
        )

    logger.info("Relaying upstream memes from %s", url)
    return JSONResponse(content=memes)
