from __future__ import annotations

import pytest

from funfood.shared.formatters import format_currency, format_distance


@pytest.mark.parametrize(
    ("amount", "expected"),
    [(0, "0 ₫"), (15000, "15.000 ₫"), (1234567.5, "1.234.568 ₫"), (40500.4, "40.500 ₫")],
)
def test_format_currency(amount: float, expected: str) -> None:
    assert format_currency(amount) == expected


@pytest.mark.parametrize(("km", "expected"), [(0.85, "850m"), (1, "1.0km"), (3.26, "3.3km")])
def test_format_distance(km: float, expected: str) -> None:
    assert format_distance(km) == expected
