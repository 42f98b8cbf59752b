"""Tests for DMS <-> decimal conversion."""

from __future__ import annotations

import pytest

from lad_registry.contracts.coordinates import DMSValue, GeoPoint
from lad_registry.services.geodesy.codec import (
    dms_to_decimal,
    point_position,
    to_decimal,
    to_dms,
)

ONE_HUNDREDTH_SECOND = 0.01 / 3600


class TestToDecimal:
    def test_combines_fields_and_negates(self):
        assert to_decimal("34", "30", "0") == pytest.approx(-34.5)

    def test_seconds(self):
        assert to_decimal("58", "22", "54") == pytest.approx(-(58 + 22 / 60 + 54 / 3600))

    def test_sign_is_not_carried_per_field(self):
        assert to_decimal("-34", "-30", "-0") == pytest.approx(-34.5)

    def test_empty_fields_count_as_zero(self):
        assert to_decimal("34", "", "") == pytest.approx(-34.0)
        assert to_decimal("", "", "") == 0.0
        assert to_decimal(None, None, None) == 0.0

    def test_garbage_degrades_to_zero(self):
        assert to_decimal("abc", "30", "x") == pytest.approx(-0.5)

    def test_non_finite_degrades_to_zero(self):
        assert to_decimal("nan", "inf", "30") == pytest.approx(-30 / 3600)

    def test_decimal_comma_accepted(self):
        assert to_decimal("34", "30", "1,5") == pytest.approx(-(34.5 + 1.5 / 3600))

    def test_dms_value_helper(self):
        value = DMSValue(degrees="34", minutes="36", seconds="30")
        assert dms_to_decimal(value) == to_decimal("34", "36", "30")


class TestToDMS:
    def test_basic_split(self):
        dms = to_dms(-34.5)
        assert (dms.degrees, dms.minutes, dms.seconds) == ("34", "30", "0.00")

    def test_seconds_have_two_decimals(self):
        dms = to_dms(-(58 + 23 / 60 + 2 / 3600))
        assert dms.degrees == "58"
        assert dms.minutes == "23"
        assert dms.seconds == "2.00"

    def test_sign_dropped(self):
        assert to_dms(34.25) == to_dms(-34.25)

    def test_seconds_rounding_to_sixty_carries(self):
        dms = to_dms(-34.9999999)
        assert (dms.degrees, dms.minutes, dms.seconds) == ("35", "0", "0.00")

    def test_seconds_carry_into_minutes(self):
        dms = to_dms(-(34 + 36 / 60 + 59.999 / 3600))
        assert (dms.degrees, dms.minutes, dms.seconds) == ("34", "37", "0.00")

    @pytest.mark.parametrize(
        "value", [-34.608333, -58.381667, -27.4512, -54.80191, -0.000123, -64.999]
    )
    def test_round_trip_within_hundredth_second(self, value):
        dms = to_dms(value)
        back = to_decimal(dms.degrees, dms.minutes, dms.seconds)
        assert abs(back - value) <= ONE_HUNDREDTH_SECOND


class TestPointPosition:
    def test_position_of_point(self):
        point = GeoPoint(
            label="Umbral 1",
            lat=DMSValue(degrees="34", minutes="36", seconds="30"),
            lng=DMSValue(degrees="58", minutes="22", seconds="54"),
        )
        pos = point_position(point)
        assert pos.lat == pytest.approx(-34.608333, abs=1e-6)
        assert pos.lng == pytest.approx(-58.381667, abs=1e-6)
