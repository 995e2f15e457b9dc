from pathlib import Path

import pytest

from script_translate.config import DEFAULT_EXTENSIONS, Config, load_config
from script_translate.errors import ConfigError


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config() == Config()
    assert Config().destination == Path("out")
    assert Config().extensions == DEFAULT_EXTENSIONS


def test_reads_default_file(tmp_path, monkeypatch):
    (tmp_path / "script_translate.yaml").write_text(
        "source: scripts\nfilter: season-2\nforce: true\nextensions: [md, .txt]\nunknown: 1\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    cfg = load_config()
    assert cfg.source == Path("scripts")
    assert cfg.destination == Path("out")
    assert cfg.filter == "season-2"
    assert cfg.force is True
    assert cfg.extensions == ("md", "txt")


def test_null_values_keep_defaults(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("destination: null\nforce:\n", encoding="utf-8")
    assert load_config(p) == Config()


def test_empty_file(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config(p) == Config()


@pytest.mark.parametrize(
    "content",
    ["source: [unclosed\n", "- a\n- b\n", "extensions: 3\n", "filter: 'season('\n"],
)
def test_bad_config(tmp_path, content):
    p = tmp_path / "cfg.yaml"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(p)


def test_missing_explicit_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")


def test_merged_ignores_none():
    cfg = Config(source=Path("a"), force=True).merged(source=None, destination=Path("b"), force=None)
    assert cfg == Config(source=Path("a"), destination=Path("b"), force=True)


def test_path_pattern():
    assert Config().path_pattern() is None
    assert Config(filter="season-[12]").path_pattern().search("a/season-2/b.md")
    with pytest.raises(ConfigError):
        Config(filter="season(").path_pattern()
