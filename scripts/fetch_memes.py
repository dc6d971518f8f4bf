# fetch_memes.py
import asyncio
import tempfile
from pathlib import Path

import httpx

from meme_relay.core import process_memes
from meme_relay.shared import Config, load_config


async def run(config: Config, directory: Path, keyword: str | None):
    async with httpx.AsyncClient(timeout=config.upstream.timeout) as client:
        return await process_memes(config, client, directory, keyword=keyword)


if __name__ == "__main__":
    import argparse

    def parse_args():
        parser = argparse.ArgumentParser(
            description="Fetch the meme list, cache it encrypted and download a random image"
        )
        parser.add_argument(
            "--directory",
            type=Path,
            help="Output directory (default: a fresh temporary directory)",
        )
        parser.add_argument(
            "--keyword", type=str, help="Only keep memes whose name contains this"
        )
        parser.add_argument(
            "--config", type=Path, help="Extra TOML file merged over config.toml"
        )
        return parser.parse_args()

    args = parse_args()
    config = load_config(specific_config_file=args.config)
    directory = args.directory or Path(tempfile.mkdtemp(prefix="meme-images-"))

    result = asyncio.run(run(config, directory, args.keyword))
    print(f"[✔] Cached {result.matched}/{result.total} memes to '{result.cache_path}'")
