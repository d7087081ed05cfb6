import pytest

from mincut.aggregate import rediscovery_gaps, summarize
from mincut.errors import InvalidTrialCount


def test_gaps_between_minimum_occurrences():
    assert rediscovery_gaps([3, 2, 5, 2, 2]).tolist() == [2, 2, 1]

    summary = summarize([3, 2, 5, 2, 2])
    assert summary.minimum == 2
    assert summary.hits == 3
    assert summary.trials == 5
    assert summary.mean_gap == pytest.approx(5 / 3)


def test_all_equal_gives_gap_of_one():
    assert summarize([4, 4, 4, 4]).mean_gap == 1.0


def test_single_occurrence_gives_its_position():
    assert summarize([5, 5, 1, 5]).mean_gap == 3.0
    assert summarize([7]).mean_gap == 1.0


def test_empty_sequence():
    with pytest.raises(InvalidTrialCount):
        summarize([])
