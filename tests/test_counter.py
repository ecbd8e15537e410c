from coursebook.exercises.counter import Counter, main


def test_unseen_value_is_zero():
    assert Counter().times_seen(42) == 0


def test_counts_integers():
    ctr = Counter()
    for value in (13, 14, 16, 14, 14, 11):
        ctr.count(value)
    assert ctr.times_seen(14) == 3
    assert ctr.times_seen(13) == 1
    assert ctr.times_seen(15) == 0


def test_counts_strings():
    ctr = Counter()
    for value in ("apple", "orange", "apple"):
        ctr.count(value)
    assert ctr.times_seen("apple") == 2
    assert ctr.times_seen("orange") == 1


def test_total_matches_number_counted():
    values = ["a", "b", "a", "c", "a", "b"]
    ctr = Counter()
    for value in values:
        ctr.count(value)
    assert sum(ctr.times_seen(v) for v in set(values)) == len(values)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "saw 3 values equal to 14" in lines
    assert lines[-1] == "got 2 apples"