from pathlib import Path

import pytest
from pydantic import ValidationError

from htmlel.config import DEFAULT_CONFIG, SELF_CLOSING_TAGS, RenderConfig, load_render_config
from htmlel.errors import ConfigError
from htmlel.serialize import render


def test_default_config():
    assert DEFAULT_CONFIG.self_closing_slash is True
    assert DEFAULT_CONFIG.self_closing_tags == {"input", "img", "hr", "br", "meta", "link"}
    assert SELF_CLOSING_TAGS == DEFAULT_CONFIG.self_closing_tags


def test_config_is_frozen():
    config = RenderConfig()
    with pytest.raises(ValidationError):
        config.self_closing_slash = False


def test_load_render_config(tmp_path: Path):
    path = tmp_path / "render.yaml"
    path.write_text("self_closing_slash: false\nself_closing_tags: [br, IMG, source]\n", encoding="utf-8")

    config = load_render_config(path)

    assert config.self_closing_slash is False
    assert config.self_closing_tags == {"br", "img", "source"}
    assert render("source", "", {"src": "a.webm"}, config=config) == '<source src="a.webm">'
    assert render("hr", config=config) == "<hr></hr>"


def test_empty_config_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "render.yaml"
    path.write_text("", encoding="utf-8")

    assert load_render_config(path) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "content",
    [
        "self_closing_slash: [1, 2]\n",
        "unknown_option: true\n",
        "- a list\n",
        "self_closing_slash: [unclosed\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str):
    path = tmp_path / "render.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_render_config(path)


def test_missing_config_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_render_config(tmp_path / "missing.yaml")


def test_configs_do_not_interfere():
    slash = RenderConfig()
    no_slash = RenderConfig(self_closing_slash=False)

    assert render("br", config=no_slash) == "<br>"
    assert render("br", config=slash) == "<br />"
