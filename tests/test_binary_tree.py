from coursebook.exercises.binary_tree import BinaryTree, main


def test_len():
    tree = BinaryTree()
    assert len(tree) == 0
    tree.insert(2)
    assert len(tree) == 1
    tree.insert(1)
    assert len(tree) == 2
    tree.insert(2)
    assert len(tree) == 2


def _check_has(tree, expected):
    assert [i in tree for i in range(len(expected))] == expected


def test_has():
    tree = BinaryTree()
    _check_has(tree, [False, False, False, False, False])
    tree.insert(0)
    _check_has(tree, [True, False, False, False, False])
    tree.insert(4)
    _check_has(tree, [True, False, False, False, True])
    tree.insert(4)
    _check_has(tree, [True, False, False, False, True])
    tree.insert(3)
    _check_has(tree, [True, False, False, True, True])


def test_unbalanced():
    tree = BinaryTree()
    for i in range(100):
        tree.insert(i)
    assert len(tree) == 100
    assert 50 in tree


def test_deep_descending_tree():
    tree = BinaryTree()
    for i in reversed(range(5000)):
        tree.insert(i)
    assert len(tree) == 5000
    assert 0 in tree
    assert 5000 not in tree


def test_strings():
    tree = BinaryTree()
    tree.insert("foo")
    tree.insert("bar")
    assert "foo" in tree
    assert "bar" in tree
    assert "baz" not in tree
    assert len(tree) == 2


def test_main(capsys):
    assert main([]) == 0
    assert "has foo: True" in capsys.readouterr().out