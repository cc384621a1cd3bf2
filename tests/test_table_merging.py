import io

import pytest

from simple_algorithms.table_merging import main, merge_tables


def test_known_example():
    requests = [(3, 5), (2, 4), (1, 4), (5, 4), (5, 3)]
    assert merge_tables([1, 1, 1, 1, 1], requests) == [2, 2, 3, 5, 5]


def test_no_requests():
    assert merge_tables([4, 2], []) == []


def test_merging_everything_gives_total():
    sizes = [10, 0, 5, 0, 3, 8]
    requests = [(1, index) for index in range(2, len(sizes) + 1)]
    result = merge_tables(sizes, requests)
    assert result[-1] == sum(sizes)
    assert result == sorted(result)
    assert all(value >= max(sizes) for value in result)


def test_self_merge_keeps_largest():
    sizes = [3, 9]
    assert merge_tables(sizes, [(1, 1), (2, 2)]) == [max(sizes), max(sizes)]


@pytest.mark.parametrize("request_pair", [(0, 1), (1, 3)])
def test_invalid_table_number(request_pair):
    with pytest.raises(IndexError):
        merge_tables([1, 1], [request_pair])


def test_main(monkeypatch, capsys):
    text = "5 5\n1 1 1 1 1\n3 5\n2 4\n1 4\n5 4\n5 3\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["2", "2", "3", "5", "5"]