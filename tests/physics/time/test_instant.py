from __future__ import annotations

# Third Party Imports
import pytest
from numpy import isclose

# epochtime Imports
from epochtime.physics.time.instant import MAX_SECONDS, Era, Instant


def testFacets():
    """Test the three observable facets of an :class:`.Instant`."""
    instant = Instant(Era.PAST, 42, 7)
    assert instant.era is Era.PAST
    assert instant.seconds == 42
    assert instant.secs() == 42
    assert instant.nanos == 7

    assert Instant(Era.PRESENT, 5).nanos == 0


@pytest.mark.parametrize(
    ("seconds", "nanos"),
    [
        (-1, 0),
        (MAX_SECONDS + 1, 0),
        (0, -1),
        (0, 1_000_000_000),
    ],
)
def testOutOfRange(seconds: int, nanos: int):
    """Test that facets outside their ranges are rejected."""
    with pytest.raises(ValueError, match="Instant"):
        Instant(Era.PRESENT, seconds, nanos)


def testBadTypes():
    """Test that facets of the wrong type are rejected."""
    with pytest.raises(TypeError):
        Instant("PRESENT", 0, 0)
    with pytest.raises(TypeError):
        Instant(Era.PRESENT, 1.0, 0)
    with pytest.raises(TypeError):
        Instant(Era.PRESENT, 0, 0.5)
    with pytest.raises(TypeError):
        Instant(Era.PRESENT, True, 0)


def testBoundaryValues():
    """Test the largest valid facets."""
    instant = Instant(Era.PRESENT, MAX_SECONDS, 999_999_999)
    assert instant.seconds == MAX_SECONDS
    assert instant.nanos == 999_999_999


def testFromOffset():
    """Test building an :class:`.Instant` from a signed offset."""
    assert Instant.fromOffset(3600) == Instant(Era.PRESENT, 3600)
    assert Instant.fromOffset(-3600, 5) == Instant(Era.PAST, 3600, 5)
    assert Instant.fromOffset(0) == Instant(Era.PRESENT, 0)


def testOffset():
    """Test the signed offset from the reference epoch."""
    assert isclose(Instant(Era.PRESENT, 10, 500_000_000).offset, 10.5)
    assert isclose(Instant(Era.PAST, 10, 500_000_000).offset, -10.5)
    assert Instant(Era.PAST, 0, 0).offset == 0.0


def testOrdering():
    """Test instants are ordered by their signed offset from the reference epoch."""
    ordered = [
        Instant(Era.PAST, 100, 5),
        Instant(Era.PAST, 100),
        Instant(Era.PAST, 0, 1),
        Instant(Era.PRESENT, 0),
        Instant(Era.PRESENT, 0, 1),
        Instant(Era.PRESENT, 1),
        Instant(Era.PRESENT, MAX_SECONDS),
    ]
    assert sorted(reversed(ordered)) == ordered

    for earlier, later in zip(ordered[:-1], ordered[1:]):
        assert earlier < later
        assert earlier <= later
        assert later > earlier
        assert later >= earlier


def testZeroInBothEras():
    """Test the reference epoch tagged with either era orders the same but isn't equal."""
    past_zero = Instant(Era.PAST, 0)
    present_zero = Instant(Era.PRESENT, 0)

    assert past_zero <= present_zero
    assert past_zero >= present_zero
    assert past_zero != present_zero


def testImmutable():
    """Test an :class:`.Instant` is a hashable value."""
    instant = Instant(Era.PRESENT, 1, 2)
    with pytest.raises(AttributeError):
        instant.seconds = 5

    assert {instant, Instant(Era.PRESENT, 1, 2)} == {instant}


def testCompareOtherTypes():
    """Test ordering against unrelated types isn't supported."""
    with pytest.raises(TypeError):
        _ = Instant(Era.PRESENT, 1) < 2
