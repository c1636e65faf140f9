"""
Config & row generator: test_config_and_generator.py

config.py:
  - Defaults: copy_rows on, validate_row_shape off
  - Environment variables override defaults; boolean parsing is lenient
  - load_config reads a .env file without clobbering variables already set
  - load_config keyword overrides win over everything
  - Unknown override raises TypeError

row_generator.py:
  - generate_rows yields every row in order and leaves the source exhausted
  - generate_rows on an exhausted source yields nothing
  - generate_row_dicts keys rows by header
  - Short rows bind missing fields as None
  - Long rows raise AlignmentError
"""

from __future__ import annotations

import os

import pytest

import sys, pathlib
_root = str(pathlib.Path(__file__).parent.parent)
if _root not in sys.path:
    sys.path.insert(0, _root)

from tableschema.configs.config import DataSourceConfig, env_flag, load_config
from tableschema.configs.exceptions import AlignmentError
from tableschema.datasources.native import NativeDataSource
from tableschema.transformers.row_generator import generate_row_dicts, generate_rows

ENV_VARS = ("TABLESCHEMA_COPY_ROWS", "TABLESCHEMA_VALIDATE_ROW_SHAPE")


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Unset config variables and make sure anything load_dotenv sets is undone."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


def make_source(rows) -> NativeDataSource:
    return NativeDataSource(rows, config=DataSourceConfig(copy_rows=True, validate_row_shape=False))


# ============================================================================
# config.py
# ============================================================================

class TestDataSourceConfig:
    def test_defaults(self, clean_env):
        cfg = DataSourceConfig()
        assert cfg.copy_rows is True
        assert cfg.validate_row_shape is False

    @pytest.mark.parametrize("raw,expected", [
        ("true", True), ("TRUE", True), ("1", True), ("yes", True), (" on ", True),
        ("false", False), ("0", False), ("no", False), ("", False),
    ])
    def test_env_flag_parsing(self, clean_env, raw, expected):
        clean_env.setenv("TABLESCHEMA_VALIDATE_ROW_SHAPE", raw)
        assert env_flag("TABLESCHEMA_VALIDATE_ROW_SHAPE", False) is expected

    def test_env_flag_default_when_unset(self, clean_env):
        assert env_flag("TABLESCHEMA_COPY_ROWS", True) is True
        assert env_flag("TABLESCHEMA_COPY_ROWS", False) is False

    def test_env_overrides(self, clean_env):
        clean_env.setenv("TABLESCHEMA_COPY_ROWS", "false")
        clean_env.setenv("TABLESCHEMA_VALIDATE_ROW_SHAPE", "true")
        cfg = DataSourceConfig()
        assert cfg.copy_rows is False
        assert cfg.validate_row_shape is True

    def test_explicit_args_beat_env(self, clean_env):
        clean_env.setenv("TABLESCHEMA_COPY_ROWS", "false")
        assert DataSourceConfig(copy_rows=True).copy_rows is True


class TestLoadConfig:
    def test_without_env_file(self, clean_env):
        cfg = load_config()
        assert cfg == DataSourceConfig(copy_rows=True, validate_row_shape=False)

    def test_reads_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "TABLESCHEMA_COPY_ROWS=false\nTABLESCHEMA_VALIDATE_ROW_SHAPE=yes\n",
            encoding="utf-8",
        )
        cfg = load_config(env_file)
        assert cfg.copy_rows is False
        assert cfg.validate_row_shape is True

    def test_process_env_wins_over_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("TABLESCHEMA_COPY_ROWS=false\n", encoding="utf-8")
        clean_env.setenv("TABLESCHEMA_COPY_ROWS", "true")
        cfg = load_config(env_file)
        assert cfg.copy_rows is True
        assert os.environ["TABLESCHEMA_COPY_ROWS"] == "true"

    def test_overrides_win(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("TABLESCHEMA_VALIDATE_ROW_SHAPE=true\n", encoding="utf-8")
        cfg = load_config(env_file, validate_row_shape=False)
        assert cfg.validate_row_shape is False

    def test_unknown_override(self, clean_env):
        with pytest.raises(TypeError):
            load_config(batch_size=10)

    def test_config_reaches_source(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("TABLESCHEMA_VALIDATE_ROW_SHAPE=true\n", encoding="utf-8")
        with pytest.raises(AlignmentError):
            NativeDataSource([["a", 1], ["b"]], config=load_config(env_file))


# ============================================================================
# row_generator.py
# ============================================================================

class TestGenerateRows:
    def test_yields_all_rows_in_order(self):
        rows = [["a", 1], ["b", 2], ["c", 3]]
        source = make_source(rows)
        assert list(generate_rows(source)) == rows
        assert source.is_exhausted() is True

    def test_lazy(self):
        source = make_source([["a"], ["b"]])
        gen = generate_rows(source)
        assert source.row_number == 0
        assert next(gen) == ["a"]
        assert source.row_number == 1

    def test_exhausted_source_yields_nothing(self):
        source = make_source([["a"]])
        source.next_row()
        assert list(generate_rows(source)) == []

    def test_empty_source(self):
        assert list(generate_rows(make_source([]))) == []


class TestGenerateRowDicts:
    def test_keys_by_header(self):
        source = make_source([["a", 1], ["b", 2]])
        assert list(generate_row_dicts(source, ["name", "id"])) == [
            {"name": "a", "id": 1},
            {"name": "b", "id": 2},
        ]

    def test_short_row_binds_none(self):
        source = make_source([["a"]])
        assert list(generate_row_dicts(source, ["name", "id"])) == [
            {"name": "a", "id": None},
        ]

    def test_long_row_raises(self):
        source = make_source([["a", 1], ["b", 2, "extra"]])
        gen = generate_row_dicts(source, ["name", "id"])
        assert next(gen) == {"name": "a", "id": 1}
        with pytest.raises(AlignmentError) as exc:
            next(gen)
        assert exc.value.row_number == 2
        assert exc.value.expected == 2
        assert exc.value.got == 3
