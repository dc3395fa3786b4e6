import pytest

from climg.errors import GeometryError
from climg.geometry import TargetResolution, fit_resolution, round_half_away
from climg.terminal import TerminalGeometry


def _terminal(columns: int, rows: int) -> TerminalGeometry:
    return TerminalGeometry(columns=columns, rows=rows)


def test_wide_image_fills_width() -> None:
    assert fit_resolution(200, 100, _terminal(80, 40)) == TargetResolution(160, 80)


def test_tall_image_fills_height() -> None:
    assert fit_resolution(100, 200, _terminal(80, 40)) == TargetResolution(76, 152)


def test_wide_image_scaled_down_when_too_tall() -> None:
    # 20x12 grid; filling the width would need 18 rows of dots
    assert fit_resolution(1000, 900, _terminal(10, 5)) == TargetResolution(13, 12)


def test_tall_image_scaled_down_when_too_wide() -> None:
    # 20x72 grid; filling the height would need 36 columns of dots
    assert fit_resolution(50, 100, _terminal(10, 20)) == TargetResolution(20, 40)


def test_square_image_uses_smaller_grid_side() -> None:
    assert fit_resolution(50, 50, _terminal(80, 40)) == TargetResolution(152, 152)
    assert fit_resolution(50, 50, _terminal(10, 40)) == TargetResolution(20, 20)


def test_short_terminal_is_clamped() -> None:
    # rows 1 and 2 are clamped to 3, leaving one row of glyphs
    assert fit_resolution(10, 10, _terminal(80, 1)) == TargetResolution(4, 4)
    assert fit_resolution(10, 10, _terminal(80, 2)) == TargetResolution(4, 4)


def test_reserved_rows_are_configurable() -> None:
    assert fit_resolution(10, 10, _terminal(80, 10), reserved_rows=0, min_rows=1) == TargetResolution(40, 40)


def test_extreme_aspect_never_collapses_to_zero() -> None:
    target = fit_resolution(10000, 1, _terminal(10, 10))
    assert target == TargetResolution(20, 1)


@pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5)])
def test_invalid_source_dimensions(width: int, height: int) -> None:
    with pytest.raises(GeometryError):
        fit_resolution(width, height, _terminal(80, 24))


@pytest.mark.parametrize(
    "source",
    [(640, 480), (480, 640), (1920, 1080), (1080, 1920), (300, 300), (1000, 999), (17, 400), (400, 17)],
)
@pytest.mark.parametrize("terminal", [(80, 24), (200, 50), (40, 100), (10, 5), (100, 200)])
def test_fit_stays_in_grid_and_keeps_aspect(source: tuple[int, int], terminal: tuple[int, int]) -> None:
    source_width, source_height = source
    columns, rows = terminal
    width, height = fit_resolution(source_width, source_height, _terminal(columns, rows))

    assert 1 <= width <= 2 * columns
    assert 1 <= height <= 4 * (rows - 2)
    # The shorter side is within rounding of the exact ratio
    if source_width >= source_height:
        assert abs(height - width * source_height / source_width) <= 1.5
    else:
        assert abs(width - height * source_width / source_height) <= 1.5


def test_round_half_away_from_zero() -> None:
    assert round_half_away(0.5) == 1
    assert round_half_away(2.5) == 3
    assert round_half_away(2.4999) == 2
    assert round_half_away(-2.5) == -3
