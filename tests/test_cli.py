import pytest

from pushswap.cli import is_ordered, main, solve
from pushswap.parsing import ParseError
from pushswap.stacks import Stacks


def _replay(values, moves):
    stacks = Stacks(values)
    for name in moves:
        getattr(stacks, name)(False)
    return stacks


def test_is_ordered_true():
    assert is_ordered([1, 2, 3]) is True
    assert is_ordered([5]) is True


def test_is_ordered_false():
    assert is_ordered([2, 1, 3]) is False


def test_solve_sorted_needs_no_moves():
    assert solve(["1", "2", "3"]) == []


def test_solve_no_arguments():
    assert solve([]) == []


def test_solve_two():
    assert solve(["2", "1"]) == ["sa"]


def test_solve_three():
    assert solve(["3", "2", "1"]) == ["ra", "sa"]


def test_solve_single_string_many_numbers():
    moves = solve(["5 4 3 2 1"])
    stacks = _replay([5, 4, 3, 2, 1], moves)
    assert list(stacks.a) == [1, 2, 3, 4, 5]
    assert not stacks.b


def test_solve_duplicates_raise():
    with pytest.raises(ParseError):
        solve(["1", "1"])


def test_solve_invalid_raises():
    with pytest.raises(ParseError):
        solve(["1", "abc"])


def test_main_prints_moves(capsys):
    assert main(["2", "1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\n"
    assert captured.err == ""


def test_main_error(capsys):
    code = main(["2147483648"])
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""
    assert code == 6


def test_main_no_arguments(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""


def test_main_output_sorts(capsys):
    args = ["8", "-3", "15", "0", "42", "7"]
    assert main(args) == 0
    moves = capsys.readouterr().out.split()
    stacks = _replay([int(arg) for arg in args], moves)
    assert list(stacks.a) == sorted(int(arg) for arg in args)
    assert not stacks.b