"""Tests for primitive validators."""
import pytest
import numpy as np
from shapeguard import Undefined, boolean, string, number, empty, nil, literal


PRIMITIVES = [True, "test", 1, Undefined, None]


class TestPrimitiveExclusivity:
    """Tests that primitive kinds never overlap."""

    @pytest.mark.parametrize("value", PRIMITIVES)
    def test_exactly_one_matches(self, value):
        """Test exactly one primitive validator accepts each primitive value."""
        matches = [v for v in (boolean, string, number, empty, nil) if v(value)]
        assert len(matches) == 1


class TestBoolean:
    """Tests for boolean."""

    def test_accepts_booleans(self):
        """Test booleans match."""
        assert boolean(True) is True
        assert boolean(False) is True
        assert boolean(np.bool_(True)) is True

    @pytest.mark.parametrize("value", [1, 0, "test", None, Undefined, {}, object()])
    def test_rejects_other_types(self, value):
        """Test non-booleans do not match."""
        assert boolean(value) is False


class TestString:
    """Tests for string."""

    def test_accepts_strings(self):
        """Test strings match."""
        assert string("test") is True
        assert string("") is True

    @pytest.mark.parametrize("value", [True, 1, b"test", None, Undefined, {}, ["t"]])
    def test_rejects_other_types(self, value):
        """Test non-strings do not match."""
        assert string(value) is False


class TestNumber:
    """Tests for number."""

    @pytest.mark.parametrize("value", [0, -3, 1.5, float('nan'), float('inf'), np.float64(2.0)])
    def test_accepts_numbers(self, value):
        """Test numbers match without range checks."""
        assert number(value) is True

    @pytest.mark.parametrize("value", [True, False, "1", None, Undefined, {}, [1], np.timedelta64(1, 'D')])
    def test_rejects_other_types(self, value):
        """Test non-numbers, booleans and durations included, do not match."""
        assert number(value) is False


class TestAbsenceMarkers:
    """Tests for empty and nil."""

    def test_empty_matches_only_undefined(self):
        """Test empty accepts Undefined and rejects None."""
        assert empty(Undefined) is True
        assert empty(None) is False
        for value in ("test", True, 1, {}, []):
            assert empty(value) is False

    def test_nil_matches_only_none(self):
        """Test nil accepts None and rejects Undefined."""
        assert nil(None) is True
        assert nil(Undefined) is False
        for value in ("test", True, 1, {}, []):
            assert nil(value) is False


class TestLiteral:
    """Tests for literal."""

    def test_same_value(self):
        """Test the captured value matches."""
        validate = literal(5)
        assert validate(5) is True
        assert validate(5.0) is True

    def test_other_values(self):
        """Test other values, including look-alikes, do not match."""
        validate = literal(5)
        assert validate(6) is False
        assert validate("5") is False
        assert validate({}) is False

    def test_bool_and_int_are_distinct(self):
        """Test literal(1) rejects True and literal(True) rejects 1."""
        assert literal(1)(True) is False
        assert literal(True)(1) is False
        assert literal(True)(True) is True

    def test_nan_never_matches(self):
        """Test NaN is not equal to itself."""
        nan = float('nan')
        assert literal(nan)(nan) is False

    def test_containers_compare_by_identity(self):
        """Test objects match only themselves, not equal copies."""
        payload = {'a': 1}
        validate = literal(payload)
        assert validate(payload) is True
        assert validate({'a': 1}) is False

    def test_absence_markers(self):
        """Test literal(None) and literal(Undefined) stay distinct."""
        assert literal(None)(None) is True
        assert literal(None)(Undefined) is False
        assert literal(Undefined)(Undefined) is True
        assert literal(Undefined)(None) is False

    def test_deterministic(self):
        """Test repeated calls give the same answer."""
        validate = literal("a")
        assert [validate("a") for _ in range(3)] == [True, True, True]
        assert [validate("b") for _ in range(3)] == [False, False, False]
