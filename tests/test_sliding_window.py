import io

import pytest

from simple_algorithms.sliding_window import WindowMaxQueue, main, sliding_window_maxima


def test_known_example():
    assert sliding_window_maxima([2, 7, 3, 1, 5, 2, 6, 2], 4) == [7, 7, 5, 6, 6]


def test_window_wider_than_values():
    assert sliding_window_maxima([1, 2, 3], 5) == []


def test_queue_max_is_none_until_full():
    queue = WindowMaxQueue(3)
    assert queue.max() is None
    queue.push(4)
    queue.push(9)
    assert queue.max() is None
    queue.push(1)
    assert queue.max() == 9


@pytest.mark.parametrize("window_size", [1, 2, 3, 5, 8])
def test_each_maximum_belongs_to_and_bounds_its_window(window_size):
    values = [5, 1, 9, 3, 3, 8, 2, 7, 4, 6, 10, 1]
    maxima = sliding_window_maxima(values, window_size)
    assert len(maxima) == len(values) - window_size + 1
    for start, result in enumerate(maxima):
        window = values[start:start + window_size]
        assert result in window
        assert all(result >= value for value in window)


def test_window_equal_to_length_gives_overall_max():
    values = [3, 14, 1, 5, 9]
    assert sliding_window_maxima(values, len(values)) == [max(values)]


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("8\n2 7 3 1 5 2 6 2\n4\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "7 7 5 6 6 \n"