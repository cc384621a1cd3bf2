import io
from collections import defaultdict

import pytest

from simple_algorithms.parallel_processing import main, schedule


def test_known_example():
    assert schedule(2, [1, 2, 3, 4, 5]) == [(0, 0), (1, 0), (0, 1), (1, 2), (0, 4)]


def test_first_jobs_take_idle_processors_in_order():
    assert schedule(4, [5, 5, 5]) == [(index, 0) for index in range(3)]


def test_zero_durations_stay_on_first_processor():
    assert schedule(3, [0] * 6) == [(0, 0)] * 6


def test_no_processors_rejected():
    with pytest.raises(ValueError):
        schedule(0, [1])


def test_no_jobs():
    assert schedule(3, []) == []


@pytest.mark.parametrize("processor_count", [1, 2, 3, 7])
def test_each_processor_runs_its_jobs_back_to_back(processor_count):
    durations = [4, 1, 7, 2, 2, 9, 3, 0, 5, 1, 6]
    assignments = schedule(processor_count, durations)
    per_processor = defaultdict(list)
    for (processor, start), duration in zip(assignments, durations):
        assert 0 <= processor < processor_count
        per_processor[processor].append((start, duration))
    for jobs in per_processor.values():
        assert jobs[0][0] == 0
        for (start, duration), (next_start, _) in zip(jobs, jobs[1:]):
            assert next_start == start + duration


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 5\n1 2 3 4 5\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "0 0\n1 0\n0 1\n1 2\n0 4\n"