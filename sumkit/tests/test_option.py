"""Tests for option.py - Present/Absent containers."""

from dataclasses import FrozenInstanceError

import pytest

from sumkit.errors import UnwrapError
from sumkit.option import Absent, Present, absent, from_nullable, present

SAMPLE_VALUES = [0, 3, "", "title", None, (1, 2), 2.5]


def _fail(*args):
    pytest.fail("branch must not run")


class TestConstruction:
    """Tests for present() and absent()."""

    def test_present_wraps_value(self):
        """Test present() builds the Present variant."""
        container = present(3)
        assert isinstance(container, Present)
        assert container.value == 3
        assert container.is_present is True
        assert container.is_absent is False

    def test_absent_has_no_payload(self):
        """Test absent() builds the Absent variant."""
        container = absent()
        assert isinstance(container, Absent)
        assert container.is_absent is True
        assert container.is_present is False

    def test_containers_are_immutable(self):
        """Test that a Present payload cannot be reassigned."""
        container = present(3)
        with pytest.raises(FrozenInstanceError):
            container.value = 4  # type: ignore[misc]

    def test_description(self):
        """Test repr/str rendering of both variants."""
        assert repr(present(3)) == "Present(3)"
        assert str(present("x")) == "Present('x')"
        assert repr(absent()) == "Absent"
        assert str(absent()) == "Absent"


class TestMatch:
    """Tests for exhaustive case analysis."""

    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_present_matches_payload(self, value):
        """Test present(v).match(identity, fail) returns v."""
        assert present(value).match(lambda v: v, _fail) == value

    def test_absent_matches_absent_branch(self):
        """Test absent().match(fail, ok) returns the absent branch's value."""
        assert absent().match(_fail, lambda: "ok") == "ok"

    def test_match_statement(self):
        """Test structural pattern matching on both variants."""

        def describe(container):
            match container:
                case Present(value):
                    return f"has {value}"
                case Absent():
                    return "empty"

        assert describe(present(7)) == "has 7"
        assert describe(absent()) == "empty"


class TestMap:
    """Tests for map() and and_then()."""

    def test_map_present(self):
        """Test map transforms the payload."""
        assert present(3).map(lambda v: v * 2) == present(6)

    def test_map_absent_skips_transform(self):
        """Test map over Absent never calls the transform."""
        calls = []

        def transform(value):
            calls.append(value)
            return value

        assert absent().map(transform) == absent()
        assert calls == []

    @pytest.mark.parametrize("container", [present(2), present(-5), absent()])
    def test_map_composition(self, container):
        """Test c.map(f).map(g) == c.map(g . f)."""

        def f(x):
            return x + 1

        def g(x):
            return x * 10

        assert container.map(f).map(g) == container.map(lambda x: g(f(x)))

    def test_and_then_present(self):
        """Test and_then flattens a transform returning an Option."""
        assert present(4).and_then(lambda v: present(v + 1)) == present(5)
        assert present(4).and_then(lambda v: absent()) == absent()

    def test_and_then_absent_skips_transform(self):
        """Test and_then over Absent never calls the transform."""
        assert absent().and_then(_fail) == absent()


class TestUnwrap:
    """Tests for unwrap_or() and force_unwrap()."""

    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_unwrap_or_present(self, value):
        """Test unwrap_or returns the payload when present."""
        assert present(value).unwrap_or("default") == value

    def test_unwrap_or_absent(self):
        """Test unwrap_or returns the default when absent."""
        assert absent().unwrap_or("default") == "default"

    def test_force_unwrap_present(self):
        """Test force_unwrap returns the payload when present."""
        assert present("x").force_unwrap() == "x"

    def test_force_unwrap_absent(self):
        """Test force_unwrap on Absent is a programmer error."""
        with pytest.raises(UnwrapError):
            absent().force_unwrap()


class TestEquality:
    """Tests for container equality."""

    def test_equal_present(self):
        assert present(3) == present(3)

    def test_different_present(self):
        assert present(3) != present(4)

    def test_absent_equals_absent(self):
        assert absent() == absent()

    def test_present_not_equal_absent(self):
        assert present(3) != absent()
        assert absent() != present(3)

    def test_hashable(self):
        """Test containers with hashable payloads can be set members."""
        assert {present(1), present(1), absent(), absent()} == {present(1), absent()}


class TestNullable:
    """Tests for bridging to None."""

    def test_from_nullable_none(self):
        assert from_nullable(None) == absent()

    def test_from_nullable_value(self):
        assert from_nullable(4) == present(4)

    def test_from_nullable_keeps_falsy_values(self):
        """Test that falsy values other than None stay present."""
        assert from_nullable(0) == present(0)
        assert from_nullable("") == present("")

    def test_to_nullable(self):
        assert present(5).to_nullable() == 5
        assert absent().to_nullable() is None
