import pytest

from coursebook.exercises.collatz import collatz_length, main


def test_collatz_length_of_eleven():
    assert collatz_length(11) == 15


@pytest.mark.parametrize("start", [0, 1, -7])
def test_sequence_at_or_below_one_has_length_one(start):
    assert collatz_length(start) == 1


@pytest.mark.parametrize("n", [1, 3, 11, 27, 100])
def test_doubling_adds_one_step(n):
    assert collatz_length(2 * n) == collatz_length(n) + 1


@pytest.mark.parametrize("n", [3, 5, 11, 27])
def test_odd_number_step(n):
    assert collatz_length(n) == collatz_length(3 * n + 1) + 1


def test_main_prints_length(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Length: 15\n"