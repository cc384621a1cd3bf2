import io

import pytest

from simple_algorithms.brackets import check_brackets, main

BALANCED = ["", "()", "[]{}", "([](){([])})", "{[()()]}", "a(b)c[d]{e}"]


@pytest.mark.parametrize("text", BALANCED)
def test_balanced_strings_succeed(text):
    assert check_brackets(text) is None


@pytest.mark.parametrize("text", BALANCED)
def test_extra_closing_reported_at_its_position(text):
    assert check_brackets(text + ")") == len(text) + 1


@pytest.mark.parametrize("text", BALANCED)
def test_unclosed_opening_reports_earliest(text):
    assert check_brackets("(" + text) == 1
    assert check_brackets("[" + text + "{") == 1


def test_mismatched_closing_reports_closing_position():
    assert check_brackets("{[}") == 3


def test_non_bracket_characters_ignored():
    assert check_brackets("hello world") is None
    assert check_brackets("foo(bar") == len("foo(")


def test_main_success(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("([])\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Success\n"


def test_main_reports_position(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("[]]\n"))
    main([])
    assert capsys.readouterr().out.strip() == str(len("[]]"))