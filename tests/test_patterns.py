import pytest

from drills import patterns
from drills.patterns import (
    arrow,
    counting_triangle,
    floyd_triangle,
    inverted_pyramid,
    inverted_star_triangle,
    main,
    mirrored_numbers,
    pyramid,
    repeated_number_triangle,
    right_aligned_triangle,
    star_triangle,
)


@pytest.mark.parametrize("n", [1, 3, 5, 8])
def test_star_triangle_rows_grow(n):
    lines = star_triangle(n)
    assert len(lines) == n
    assert [line.count("*") for line in lines] == list(range(1, n + 1))
    assert all(line.endswith("* ") for line in lines)


@pytest.mark.parametrize("n", [1, 4, 5])
def test_inverted_star_triangle_is_reverse(n):
    assert inverted_star_triangle(n) == list(reversed(star_triangle(n)))


def test_counting_triangle_rows():
    lines = counting_triangle(5)
    assert [line.split() for line in lines] == [
        [str(j) for j in range(1, i + 1)] for i in range(1, 6)
    ]


def test_repeated_number_triangle_rows():
    for i, line in enumerate(repeated_number_triangle(5), start=1):
        assert line.split() == [str(i)] * i


def test_right_aligned_triangle_matches_documented_shape():
    lines = right_aligned_triangle(5)
    assert lines[0] == "    *"
    assert lines[-1] == "*****"
    assert {len(line) for line in lines} == {5}


def test_pyramid_matches_documented_shape():
    assert pyramid(5)[0] == "    *"
    assert pyramid(5)[-1] == "*********"
    assert [line.count("*") for line in pyramid(5)] == [1, 3, 5, 7, 9]


def test_inverted_pyramid_is_reverse_of_pyramid():
    assert inverted_pyramid(6) == list(reversed(pyramid(6)))


def test_arrow_shape():
    lines = arrow(5)
    assert len(lines) == 9
    assert lines[:5] == [line.replace(" ", "") for line in right_aligned_triangle(5)]
    assert lines[5:] == list(reversed(lines[:4]))


def test_mirrored_numbers_rows_are_palindromes_of_equal_width():
    lines = mirrored_numbers(5)
    assert lines[-1] == "1234554321"
    assert all(line == line[::-1] for line in lines)
    assert {len(line) for line in lines} == {10}


def test_floyd_triangle_counts_consecutively():
    lines = floyd_triangle(5)
    numbers = [int(token) for line in lines for token in line.split()]
    assert numbers == list(range(1, len(numbers) + 1))
    assert [len(line.split()) for line in lines] == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("name", sorted(patterns.PATTERNS))
def test_zero_rows_produce_nothing(name):
    assert patterns.PATTERNS[name](0) == []


def test_main_prints_selected_pattern(capsys):
    assert main(["pyramid", "--rows", "3"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == pyramid(3)


def test_main_default_is_star_triangle(capsys):
    main([])
    assert capsys.readouterr().out.splitlines() == star_triangle(5)


def test_main_rejects_unknown_pattern():
    with pytest.raises(SystemExit):
        main(["hexagon"])