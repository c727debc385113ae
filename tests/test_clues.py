import random

from detective_quest import clues


def build(texts):
    root = None
    for text in texts:
        root = clues.insert(root, text)
    return root


def test_insert_into_empty_tree_returns_new_root():
    root = clues.insert(None, "Livros deslocados")
    assert root.text == "Livros deslocados"
    assert root.lesser is None and root.greater is None


def test_insert_returns_same_root_for_existing_tree():
    root = clues.insert(None, "M")
    assert clues.insert(root, "A") is root
    assert clues.insert(root, "Z") is root
    assert root.lesser.text == "A"
    assert root.greater.text == "Z"


def test_duplicate_insert_is_silent_noop():
    root = build(["Carta rasgada encontrada", "Carta rasgada encontrada"])
    assert list(clues.in_order(root)) == ["Carta rasgada encontrada"]
    assert root.lesser is None and root.greater is None


def test_in_order_is_sorted_for_any_insertion_order():
    texts = ["Pegadas na entrada", "Livros deslocados", "Pegadas úmidas na cozinha",
             "Carta rasgada encontrada", "Livros deslocados", "Anel perdido"]
    expected = sorted(set(texts))
    rng = random.Random(7)
    for _ in range(20):
        shuffled = texts[:]
        rng.shuffle(shuffled)
        listed = list(clues.in_order(build(shuffled)))
        assert listed == expected
        assert all(a < b for a, b in zip(listed, listed[1:]))


def test_inserting_twice_equals_inserting_once():
    once = list(clues.in_order(build(["b", "a", "c"])))
    twice = list(clues.in_order(build(["b", "a", "c", "a", "c", "b"])))
    assert once == twice


def test_ordering_is_case_sensitive_code_point_order():
    listed = list(clues.in_order(build(["banana", "Banana", "apple"])))
    assert listed == ["Banana", "apple", "banana"]


def test_in_order_calls_visitor_lazily():
    root = build(["b", "a", "c"])
    seen = []
    walk = clues.in_order(root, seen.append)
    assert seen == []
    assert next(walk) == "a"
    assert seen == ["a"]
    assert list(walk) == ["b", "c"]
    assert seen == ["a", "b", "c"]


def test_in_order_empty_tree():
    assert list(clues.in_order(None)) == []


def test_sorted_input_deeper_than_recursion_limit():
    texts = [f"clue {i:05d}" for i in range(3000)]
    root = build(texts)
    assert list(clues.in_order(root)) == texts
    assert clues.count(root) == 3000
    assert clues.teardown(root) == 3000


def test_teardown_visits_each_node_once_and_unlinks():
    root = build(["m", "f", "t", "a", "h", "p", "z"])
    left = root.lesser
    assert clues.teardown(root) == 7
    assert root.lesser is None and root.greater is None
    assert left.lesser is None and left.greater is None
    assert clues.teardown(None) == 0
