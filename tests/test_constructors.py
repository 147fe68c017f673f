"""Tests for make_ok, make_err, Unit and collect."""

from hypothesis import given

from okerr import UNIT, Err, Ok, Result, Unit, collect, make_err, make_ok
from tests.strategies import payloads


class TestMakeOk:
    """Tests for make_ok()."""

    def test_returns_ok(self):
        result = make_ok(42)
        assert isinstance(result, Ok)
        assert result.is_ok()

    def test_with_err_type(self):
        """err_type only pins the static type; the value is the same."""
        result: Result[int, str] = make_ok(42, str)
        assert result == Ok(42)

    @given(payloads)
    def test_round_trip(self, value):
        assert make_ok(value).unwrap() == value


class TestMakeErr:
    """Tests for make_err()."""

    def test_returns_err(self):
        result = make_err('Error occurred')
        assert isinstance(result, Err)
        assert result.is_err()

    def test_with_ok_type(self):
        result: Result[int, str] = make_err('Error occurred', int)
        assert result == Err('Error occurred')

    @given(payloads)
    def test_round_trip(self, error):
        assert make_err(error).unwrap_err() == error


class TestUnit:
    """Tests for the Unit marker."""

    def test_instances_equal(self):
        assert Unit() == UNIT

    def test_hashable(self):
        assert hash(Unit()) == hash(UNIT)

    def test_as_ok_payload(self):
        """Result[Unit, E] signals success without data."""
        result: Result[Unit, int] = make_ok(UNIT, int)
        assert result.unwrap() is UNIT

    def test_as_err_payload(self):
        result: Result[str, Unit] = make_err(UNIT, str)
        assert result.unwrap_err() == Unit()


class TestCollect:
    """Tests for collect()."""

    def test_all_ok(self):
        assert collect([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_with_err(self):
        assert collect([Ok(1), Err('error'), Ok(3)]) == Err('error')

    def test_empty(self):
        assert collect([]) == Ok([])

    def test_first_err_wins(self):
        assert collect([Err('first'), Err('second')]) == Err('first')

    def test_stops_consuming_after_err(self):
        seen = []

        def produce():
            for item in (Ok(1), Err('stop'), Ok(3)):
                seen.append(item)
                yield item

        assert collect(produce()) == Err('stop')
        assert seen == [Ok(1), Err('stop')]
