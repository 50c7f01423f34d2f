# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from link_finder.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("max_depth: 1\nsettle_delay: 0", ".yaml", None),
        (json.dumps({"max_depth": 1, "settle_delay": 0}), ".json", None),
        ("max_depth: -1", ".yml", ValidationError),
        ("unknown_option: true", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken json", ".json", ValueError),
        ("max_depth = 1", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.max_depth == 1
        assert cfg.settle_delay == 0


def test_defaults_without_any_config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PORT", raising=False)
    cfg = load_config(None)
    assert cfg.max_depth == 2
    assert cfg.robots_timeout == 5.0
    assert cfg.sitemap_timeout == 10.0
    assert cfg.page_timeout == 30.0
    assert cfg.robots_agent == "LinkFinderBot"
    assert cfg.user_agent.endswith("LinkFinderBot/1.0")
    assert cfg.all_link_elements is False
    assert cfg.port == 3000


def test_default_yaml_is_picked_up(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("max_depth: 4\n", encoding="utf-8")
    assert load_config(None).max_depth == 4


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8081")
    assert CrawlerConfig().port == 8081
    assert CrawlerConfig(port=9000).port == 9000


def test_config_is_frozen():
    cfg = CrawlerConfig()
    with pytest.raises(ValidationError):
        cfg.max_depth = 5
