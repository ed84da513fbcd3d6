import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from mungepipe.config.loader import load_config
from mungepipe.config.schema import AppConfig


def test_load_config_merges_overrides(monkeypatch):
    base = """
logging:
  verbose: false
  log_file: "${MUNGE_LOG_DIR}/munge.log.json"
pipeline:
  steps:
    - name: fill
      transformation: impute
      columns: [b]
"""
    override = """
logging:
  verbose: true
"""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("MUNGE_LOG_DIR", "logs")
        base_path = Path(tmpdir) / "base.yaml"
        override_path = Path(tmpdir) / "override.yaml"
        base_path.write_text(base, encoding="utf-8")
        override_path.write_text(override, encoding="utf-8")

        cfg = load_config([base_path, override_path])
        assert cfg.logging.verbose is True
        assert cfg.logging.log_file == "logs/munge.log.json"
        assert cfg.pipeline.steps[0].transformation == "impute"
        assert cfg.pipeline.steps[0].columns == ["b"]


def test_override_replaces_steps(tmp_path):
    base = tmp_path / "base.yaml"
    override = tmp_path / "override.yaml"
    base.write_text("pipeline:\n  steps:\n    - transformation: impute\n    - transformation: clip\n")
    override.write_text("pipeline:\n  steps:\n    - transformation: standardize\n")

    cfg = load_config([base, override])

    assert [s.transformation for s in cfg.pipeline.steps] == ["standardize"]


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    cfg = load_config(path)

    assert cfg == AppConfig()
    assert cfg.pipeline.steps == []
    assert cfg.logging.verbose is False


def test_duplicate_step_names_rejected():
    with pytest.raises(ValidationError, match="Duplicate pipeline step names"):
        AppConfig(
            pipeline={
                "steps": [
                    {"name": "a", "transformation": "clip"},
                    {"name": "a", "transformation": "impute"},
                ]
            }
        )


def test_blank_transformation_rejected():
    with pytest.raises(ValidationError):
        AppConfig(pipeline={"steps": [{"transformation": "  "}]})


def test_programmatic_overrides_applied_last(tmp_path):
    path = tmp_path / "base.yaml"
    path.write_text("logging:\n  verbose: false\n  log_file: base.json\n")

    cfg = load_config(path, overrides={"logging": {"verbose": True}})

    assert cfg.logging.verbose is True
    assert cfg.logging.log_file == "base.json"


def test_non_mapping_file_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")

    with pytest.raises(ValueError, match="must contain a mapping"):
        load_config(path)
