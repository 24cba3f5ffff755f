"""Alphabet arithmetic and integer matrix helpers."""

import numpy as np
import pytest

from shared.math_utils import (
    as_matrix,
    extended_gcd,
    format_matrix,
    index_letter,
    is_blank,
    is_letter,
    letter_index,
    letters_only,
    matrix_adjugate,
    matrix_determinant,
    matrix_inverse_mod,
    matrix_vector_mod,
    mod,
    mod_inverse,
    shift,
)


def test_mod_is_never_negative():
    assert mod(-1) == 25
    assert mod(-27) == 25
    assert mod(52) == 0
    assert mod(-3, 7) == 4


def test_is_letter_ascii_only():
    assert is_letter("a") and is_letter("Z")
    assert not is_letter("é")
    assert not is_letter("1")
    assert not is_letter("ab")


def test_is_blank():
    assert is_blank("")
    assert is_blank("  \t\n")
    assert is_blank(None)
    assert not is_blank(" x ")


def test_letter_index_and_back():
    assert letter_index("A") == 0
    assert letter_index("z") == 25
    assert index_letter(27) == "B"
    assert index_letter(-1, upper=False) == "z"
    with pytest.raises(ValueError):
        letter_index("?")


def test_shift_wraps_and_keeps_case():
    assert shift("y", 3) == "b"
    assert shift("A", -1) == "Z"
    assert shift("!", 5) == "!"


def test_letters_only():
    assert letters_only("Hello, World! 42") == "HELLOWORLD"


def test_extended_gcd_identity():
    g, x, y = extended_gcd(240, 46)
    assert g == 2
    assert 240 * x + 46 * y == g


def test_mod_inverse():
    assert mod_inverse(3) == 9
    assert mod_inverse(9) == 3
    assert (7 * mod_inverse(7)) % 26 == 1
    with pytest.raises(ValueError):
        mod_inverse(13)


def test_as_matrix_rejects_ragged():
    with pytest.raises(ValueError):
        as_matrix([[1, 2], [3]])
    with pytest.raises(ValueError):
        as_matrix([1, 2, 3])


def test_as_matrix_rejects_non_integers():
    for rows in ([[1.5, 2], [3, 4]], [[False, 1], [1, 1]], [["1", "2"]]):
        with pytest.raises(ValueError):
            as_matrix(rows)


def test_as_matrix_reduces_before_conversion():
    assert as_matrix([[10**30 + 3, -1]], modulus=26).tolist() == [[(10**30 + 3) % 26, 25]]
    with pytest.raises(ValueError):
        as_matrix([[10**30]])


def test_determinant_2x2_and_3x3():
    assert matrix_determinant(as_matrix([[3, 3], [2, 5]])) == 9
    assert matrix_determinant(as_matrix([[6, 24, 1], [13, 16, 10], [20, 17, 15]])) == 441


def test_adjugate_2x2():
    assert matrix_adjugate(as_matrix([[1, 2], [3, 4]])).tolist() == [[4, -2], [-3, 1]]


def test_inverse_mod_gives_identity():
    for rows in ([[3, 3], [2, 5]], [[6, 24, 1], [13, 16, 10], [20, 17, 15]]):
        key = as_matrix(rows)
        product = np.mod(key @ matrix_inverse_mod(key), 26)
        assert product.tolist() == np.eye(len(rows), dtype=np.int64).tolist()


def test_inverse_mod_known_value():
    assert matrix_inverse_mod(as_matrix([[3, 3], [2, 5]])).tolist() == [[15, 17], [20, 9]]


def test_inverse_mod_rejects_singular():
    with pytest.raises(ValueError):
        matrix_inverse_mod(as_matrix([[2, 4], [6, 8]]))


def test_matrix_vector_mod():
    assert matrix_vector_mod(as_matrix([[3, 3], [2, 5]]), [7, 4]) == [7, 8]


def test_format_matrix():
    assert format_matrix(as_matrix([[3, 3], [2, 5]])) == "[[3, 3], [2, 5]]"
