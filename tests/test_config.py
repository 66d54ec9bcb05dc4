"""Tests for scngen.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from scngen.config import ScnConfig, load_config
from scngen.errors import ConfigError
from scngen.ids import IdStyle


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ScnConfig)
    assert config.root == tmp_path.resolve()
    assert config.render.id_style is IdStyle.VERBATIM
    assert config.render.uppercase_containers is False
    assert config.render.max_workers is None
    assert config.providers.enabled == []
    assert config.output is None
    assert config.log_file is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".scn.yml"
    config_file.write_text(
        """
render:
  id_style: compact
  uppercase_containers: yes
  max_workers: 4
providers:
  enabled: [json]
output: build/context.scn
log_file: scngen.log
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.render.id_style is IdStyle.COMPACT
    assert config.render.uppercase_containers is True
    assert config.render.max_workers == 4
    assert config.providers.enabled == ["json"]
    assert config.output == tmp_path.resolve() / "build" / "context.scn"
    assert config.log_file == tmp_path.resolve() / "scngen.log"

    options = config.render.to_options()
    assert options.id_style is IdStyle.COMPACT
    assert options.max_workers == 4


def test_load_config_rejects_unknown_id_style(tmp_path: Path) -> None:
    (tmp_path / ".scn.yml").write_text("render:\n  id_style: fancy\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="id_style"):
        load_config(tmp_path)


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".scn.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path)


def test_load_config_reports_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".scn.yml").write_text("render: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)


def test_load_config_empty_file_gives_defaults(tmp_path: Path) -> None:
    (tmp_path / ".scn.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).render.id_style is IdStyle.VERBATIM
