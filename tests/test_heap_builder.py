import io

import pytest

from simple_algorithms.heap_builder import build_heap, main, sift_down

ARRAYS = [
    [],
    [1],
    [2, 1],
    [5, 4, 3, 2, 1],
    [7, 3, 9, 3, 1, 8, 2, 2, 6, 0],
    [1.5, -2.0, 3.25, 0.0, -7.5],
]


def _is_min_heap(values):
    return all(
        values[(child - 1) // 2] <= values[child] for child in range(1, len(values))
    )


@pytest.mark.parametrize("values", ARRAYS)
def test_result_is_heap_permutation(values):
    heap = list(values)
    build_heap(heap)
    assert _is_min_heap(heap)
    assert sorted(heap) == sorted(values)


@pytest.mark.parametrize("values", ARRAYS)
def test_replaying_swaps_reproduces_heap(values):
    heap = list(values)
    swaps = build_heap(heap)
    replay = list(values)
    for first, second in swaps:
        replay[first], replay[second] = replay[second], replay[first]
    assert replay == heap


def test_sorted_array_needs_no_swaps():
    assert build_heap([1, 2, 3, 4, 5, 6]) == []


def test_descending_example():
    assert build_heap([5, 4, 3, 2, 1]) == [(1, 4), (0, 1), (1, 3)]


def test_sift_down_appends_to_given_list():
    values = [9, 1, 2]
    swaps = [("earlier", "swap")]
    sift_down(values, 0, swaps)
    assert swaps[0] == ("earlier", "swap")
    assert values[0] == 1
    assert swaps[1:] == [(0, 1)]


def test_main_sorted(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2 3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "0\n"