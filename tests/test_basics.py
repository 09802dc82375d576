import random

import pytest

from dsbasics.basics import (
    average,
    describe_arguments,
    list_directory,
    main,
    random_item,
    read_lines,
)


def test_average_value():
    assert average(1, 2) == 1.5


@pytest.mark.parametrize("a,b", [(1.0, 2.0), (-3.5, 7.25), (0.0, 0.0)])
def test_average_symmetric_and_between(a, b):
    m = average(a, b)
    assert m == average(b, a)
    assert min(a, b) <= m <= max(a, b)


def test_average_of_equal_values():
    assert average(4.0, 4.0) == 4.0


def test_random_item_in_items():
    words = ["Hello", "World", "how", "are", "you"]
    rng = random.Random(7)
    picks = {random_item(words, rng) for _ in range(50)}
    assert picks <= set(words)
    assert len(picks) > 1


def test_random_item_is_reproducible():
    words = ["a", "b", "c", "d"]
    first = [random_item(words, random.Random(3)) for _ in range(5)]
    second = [random_item(words, random.Random(3)) for _ in range(5)]
    assert first == second


def test_random_item_empty():
    with pytest.raises(IndexError):
        random_item([])


def test_describe_arguments():
    lines = describe_arguments(["prog", "test.txt", "b"])
    assert lines[0] == "You have entered 3 command line arguments:"
    assert lines[1:] == ["argv[0]: prog", "argv[1]: test.txt", "argv[2]: b"]


def test_describe_arguments_requires_one():
    with pytest.raises(ValueError, match="Usage: prog <filename>"):
        describe_arguments(["prog"])


def test_read_lines_round_trip(tmp_path):
    content = ["first line", "", "third line"]
    path = tmp_path / "test.txt"
    path.write_text("\n".join(content) + "\n", encoding="utf-8")
    assert list(read_lines(path)) == content


def test_read_lines_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(read_lines(tmp_path / "missing.txt"))


def test_list_directory(tmp_path):
    for name in ("b.txt", "a.txt", "c"):
        (tmp_path / name).touch()
    entries = list_directory(tmp_path)
    assert [p.name for p in entries] == ["a.txt", "b.txt", "c"]


def test_main_args(capsys):
    assert main(["args", "x", "y"]) == 0
    out = capsys.readouterr().out
    assert "You have entered 3 command line arguments:" in out
    assert "argv[2]: y" in out


def test_main_args_without_values(capsys):
    assert main(["args"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_read(tmp_path, capsys):
    path = tmp_path / "test.txt"
    path.write_text("alpha\nbeta\n", encoding="utf-8")
    assert main(["read", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["I read: alpha", "I read: beta"]


def test_main_read_missing(tmp_path, capsys):
    assert main(["read", str(tmp_path / "nope.txt")]) == 1
    assert "Unable to open file!" in capsys.readouterr().err


def test_main_pick(capsys):
    assert main(["pick", "only"]) == 0
    assert capsys.readouterr().out.strip() == "Pick a random string: only"