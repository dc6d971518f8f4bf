from logging import CRITICAL, DEBUG, ERROR, INFO, WARNING
from os import PathLike, environ
from pathlib import Path
from tomllib import load

from pydantic import BaseModel, field_validator

DEFAULT_CONFIG_PATH = Path("config.toml")
MEME_URL_ENV = "MEME_URL"


class General(BaseModel):
    title: str


class Logging(BaseModel):
    level: int = INFO

    @field_validator("level", mode="before")
    @classmethod
    def convert_log_level(cls, value):
        if isinstance(value, int):
            return value
        log_levels = {
            "DEBUG": DEBUG,
            "INFO": INFO,
            "WARNING": WARNING,
            "ERROR": ERROR,
            "CRITICAL": CRITICAL,
        }
        return log_levels.get(value.upper(), INFO)


class Paths(BaseModel):
    logs: str


class Upstream(BaseModel):
    url: str = ""  # checked on first use, not at startup
    timeout: float = 10.0
    memes_path: list[str] = ["data", "memes"]


class Crypto(BaseModel):
    key: str = ""  # 32 bytes once UTF-8 encoded
    iv: str = ""  # 16 bytes once UTF-8 encoded


class Network(BaseModel):
    host: str
    port: int
    reload: bool


class Config(BaseModel):
    general: General
    paths: Paths
    logging: Logging
    upstream: Upstream = Upstream()
    crypto: Crypto = Crypto()
    network: Network


def load_config(
    shared_config_file: PathLike = DEFAULT_CONFIG_PATH,
    specific_config_file: PathLike | None = None,
) -> Config:
    """Load and merge configurations from TOML files.

    A non-empty ``MEME_URL`` environment variable overrides ``upstream.url``.
    """
    with Path(shared_config_file).open("rb") as f:
        config_data = load(f)

    if specific_config_file:
        with Path(specific_config_file).open("rb") as f:
            specific_data = load(f)
            config_data.update(specific_data)

    meme_url = environ.get(MEME_URL_ENV)
    if meme_url:
        config_data.setdefault("upstream", {})["url"] = meme_url

    return Config(**config_data)
