from coursebook.exercises.citation import Citation, main, minimum

CIT1 = Citation("Shapiro", 2011)
CIT2 = Citation("Baumann", 2010)
CIT3 = Citation("Baumann", 2019)


def test_minimum_by_author():
    assert minimum(CIT1, CIT2) == CIT2


def test_minimum_by_year():
    assert minimum(CIT2, CIT3) == CIT2


def test_minimum_author_before_year():
    assert minimum(CIT1, CIT3) == CIT3


def test_less_than_is_strict():
    assert not CIT1.less_than(CIT1)
    assert CIT2.less_than(CIT3)
    assert not CIT3.less_than(CIT2)


def test_minimum_of_equal_returns_right():
    left = Citation("Baumann", 2010)
    right = Citation("Baumann", 2010)
    assert minimum(left, right) is right


def test_minimum_is_symmetric():
    for a, b in ((CIT1, CIT2), (CIT2, CIT3), (CIT1, CIT3)):
        assert minimum(a, b) == minimum(b, a)


def test_main_prints_three(capsys):
    assert main([]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 3