from pathlib import Path

import pytest
from pydantic import ValidationError

from climg.config import RenderConfig
from climg.terminal import TerminalGeometry


def test_defaults() -> None:
    config = RenderConfig()
    assert config.fallback_geometry == TerminalGeometry(columns=100, rows=200)
    assert config.reserved_rows == 2
    assert config.min_rows == 3
    assert config.invert is False
    assert config.threshold is None


def test_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "climg.yaml"
    path.write_text("climg:\n  fallback_columns: 80\n  fallback_rows: 24\n  invert: true\n  threshold: 90\n")
    config = RenderConfig.from_yaml(path)
    assert config.fallback_geometry == TerminalGeometry(columns=80, rows=24)
    assert config.invert is True
    assert config.threshold == 90


def test_from_yaml_nested_keys_with_bom(tmp_path: Path) -> None:
    path = tmp_path / "tools.yaml"
    path.write_text("tools:\n  render:\n    reserved_rows: 1\n    min_rows: 2\n", encoding="utf-8-sig")
    config = RenderConfig.from_yaml(path, ("tools", "render"))
    assert config.reserved_rows == 1
    assert config.min_rows == 2


def test_empty_section_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "climg.yaml"
    path.write_text("climg:\n")
    assert RenderConfig.from_yaml(path) == RenderConfig()


def test_missing_section(tmp_path: Path) -> None:
    path = tmp_path / "climg.yaml"
    path.write_text("other: {}\n")
    with pytest.raises(KeyError):
        RenderConfig.from_yaml(path)


@pytest.mark.parametrize(
    "values",
    [
        {"threshold": 256},
        {"threshold": -1},
        {"fallback_columns": 0},
        {"reserved_rows": 3, "min_rows": 3},
    ],
)
def test_invalid_values(values: dict[str, int]) -> None:
    with pytest.raises(ValidationError):
        RenderConfig(**values)
