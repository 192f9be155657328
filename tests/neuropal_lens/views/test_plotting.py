import pytest

from neuropal_lens.views.plotting import l2_dist, marker_radius, padded_range


@pytest.mark.parametrize(
    "span, expected",
    [
        (0.0, 6.0),
        (100.0, 5.0),
        (300.0, 3.0),
        (1000.0, 1.0),
        (None, 6.0),
        (-50.0, 6.0),
    ],
)
def test_marker_radius_clamped(span, expected):
    assert marker_radius(span) == pytest.approx(expected)


def test_padded_range_includes_forced_points():
    assert padded_range([2.0, -3.0], include=(-15.0, 15.0), pad=0.0) == (-15.0, 15.0)
    lo, hi = padded_range([10.0, 20.0], include=(0.0,))
    assert lo == pytest.approx(-1.0)
    assert hi == pytest.approx(21.0)


def test_padded_range_degenerate():
    assert padded_range([]) == (-1.0, 1.0)
    assert padded_range([5.0]) == (4.0, 6.0)


def test_l2_dist():
    assert l2_dist(0.0, 3.0, 0.0, 4.0) == 5.0
