import pytest

from osalgo.paging import fifo_faults, lru_faults, optimal_faults

REFERENCE = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]


def test_fifo_reference_string():
    assert fifo_faults(REFERENCE, 3) == 15


def test_lru_reference_string():
    assert lru_faults(REFERENCE, 3) == 12


def test_optimal_reference_string():
    assert optimal_faults(REFERENCE, 3) == 9


@pytest.mark.parametrize("capacity", [1, 2, 3, 4, 5])
def test_optimal_never_worse(capacity):
    best = optimal_faults(REFERENCE, capacity)
    assert best <= fifo_faults(REFERENCE, capacity)
    assert best <= lru_faults(REFERENCE, capacity)


@pytest.mark.parametrize("capacity", [1, 2, 3, 4])
def test_fault_bounds(capacity):
    low, high = len(set(REFERENCE)), len(REFERENCE)
    assert low <= fifo_faults(REFERENCE, capacity) <= high
    assert low <= lru_faults(REFERENCE, capacity) <= high
    assert low <= optimal_faults(REFERENCE, capacity) <= high


def test_enough_frames_only_compulsory_faults():
    distinct = len(set(REFERENCE))
    assert fifo_faults(REFERENCE, distinct) == distinct
    assert lru_faults(REFERENCE, distinct) == distinct
    assert optimal_faults(REFERENCE, distinct) == distinct
    assert fifo_faults(REFERENCE, distinct + 5) == distinct
    assert lru_faults(REFERENCE, distinct + 5) == distinct
    assert optimal_faults(REFERENCE, distinct + 5) == distinct


def test_empty_sequence():
    assert fifo_faults([], 3) == 0
    assert lru_faults([], 3) == 0
    assert optimal_faults([], 3) == 0


def test_repeated_page_faults_once():
    assert fifo_faults([4, 4, 4, 4], 1) == 1
    assert lru_faults([4, 4, 4, 4], 1) == 1
    assert optimal_faults([4, 4, 4, 4], 1) == 1


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        fifo_faults([1, 2, 3], capacity)
    with pytest.raises(ValueError):
        lru_faults([1, 2, 3], capacity)
    with pytest.raises(ValueError):
        optimal_faults([1, 2, 3], capacity)


def test_fifo_belady_anomaly():
    pages = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]
    assert fifo_faults(pages, 4) > fifo_faults(pages, 3)


def test_accepts_iterator():
    assert lru_faults(iter(REFERENCE), 3) == lru_faults(REFERENCE, 3)