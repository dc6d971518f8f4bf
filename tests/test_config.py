import logging

import pytest

from meme_relay.core import read_meme_url
from meme_relay.shared import ConfigurationError, load_config
from meme_relay.shared.config import Upstream

CONFIG_TOML = """
[general]
title = "test relay"

[paths]
logs = "logs"

[logging]
level = "debug"

[upstream]
url = "https://example.com/get_memes"

[network]
host = "127.0.0.1"
port = 3000
reload = false
"""


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    monkeypatch.delenv("MEME_URL", raising=False)
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML)
    return path


def test_load_config_reads_toml(config_file):
    config = load_config(config_file)

    assert config.general.title == "test relay"
    assert config.logging.level == logging.DEBUG
    assert config.upstream.url == "https://example.com/get_memes"
    assert config.upstream.memes_path == ["data", "memes"]


def test_load_config_merges_specific_file(config_file, tmp_path):
    specific = tmp_path / "local.toml"
    specific.write_text('[upstream]\nurl = "https://local.test/memes"\ntimeout = 2.5\n')

    config = load_config(config_file, specific)

    assert config.upstream.url == "https://local.test/memes"
    assert config.upstream.timeout == 2.5


def test_meme_url_environment_variable_overrides_toml(config_file, monkeypatch):
    monkeypatch.setenv("MEME_URL", "https://api.imgflip.com/get_memes")

    config = load_config(config_file)

    assert read_meme_url(config) == "https://api.imgflip.com/get_memes"


def test_empty_environment_variable_is_ignored(config_file, monkeypatch):
    monkeypatch.setenv("MEME_URL", "")

    config = load_config(config_file)

    assert config.upstream.url == "https://example.com/get_memes"


def test_read_meme_url(config):
    assert read_meme_url(config) == "https://api.imgflip.com/get_memes"


@pytest.mark.parametrize("url", ["", "   "])
def test_read_meme_url_missing(config, url):
    config = config.model_copy(update={"upstream": Upstream(url=url)})

    with pytest.raises(ConfigurationError):
        read_meme_url(config)
