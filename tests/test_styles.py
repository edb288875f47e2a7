"""Tests for the style vocabulary."""

import pytest

from discansi.styles import (
    ALL_CODES,
    Band,
    BOLD,
    InvalidStyleError,
    band_of,
    is_valid,
    style_name,
    swatch,
    validate,
)


@pytest.mark.parametrize("code,band", [
    (0, Band.DECORATION),
    (1, Band.DECORATION),
    (9, Band.DECORATION),
    (30, Band.FOREGROUND),
    (37, Band.FOREGROUND),
    (40, Band.BACKGROUND),
    (47, Band.BACKGROUND),
])
def test_band_of(code, band):
    assert band_of(code) is band


def test_fixed_code_set():
    assert len(ALL_CODES) == 5 + 8 + 8
    for code in (2, 5, 38, 39, 48, 100):
        assert not is_valid(code)


def test_validate_rejects_unknown_codes():
    assert validate(BOLD) == BOLD
    with pytest.raises(InvalidStyleError):
        validate(38)
    with pytest.raises(ValueError):
        validate("31")
    with pytest.raises(InvalidStyleError):
        validate(True)


def test_names_and_swatches():
    assert style_name(45) == "Blurple"
    assert style_name(33) == "Gold"
    assert style_name(4) == "Underline"
    assert swatch(31) == "#dc322f"
    assert swatch(BOLD) is None
