"""Hill cipher."""

import pytest

from cipherstep.ciphers import HillCipher
from cipherstep.core.errors import InvalidFormatError, InvalidKeyError

KEY_2X2 = [[3, 3], [2, 5]]
KEY_3X3 = [[6, 24, 1], [13, 16, 10], [20, 17, 15]]


def test_encrypt_2x2_known_answer():
    assert HillCipher(KEY_2X2).encrypt("HELP") == "HIAT"


def test_decrypt_2x2_known_answer():
    assert HillCipher(KEY_2X2).decrypt("HIAT") == "HELP"


def test_encrypt_3x3_known_answer():
    assert HillCipher(KEY_3X3).encrypt("ACT") == "POH"


def test_decrypt_3x3_known_answer():
    assert HillCipher(KEY_3X3).decrypt("POH") == "ACT"


def test_inverse_matrix():
    cipher = HillCipher(KEY_2X2)
    assert cipher.determinant == 9
    assert cipher.inverse_matrix == [[15, 17], [20, 9]]
    assert cipher.key_matrix == KEY_2X2
    assert cipher.order == 2


@pytest.mark.parametrize("key", [KEY_2X2, KEY_3X3])
def test_round_trip_strips_padding(key):
    cipher = HillCipher(key)
    assert cipher.decrypt(cipher.encrypt("Hello, World")) == "HELLOWORLD"


def test_encrypt_pads_to_block_size():
    cipher = HillCipher(KEY_3X3)
    assert len(cipher.encrypt("HELLO")) == 6


@pytest.mark.parametrize("key", [
    [[2, 4], [6, 8]],
    [[2, 4], [1, 3]],
    [[1, 2], [3, 4]],
    [[13, 0], [0, 1]],
    [[1, 2, 3], [4, 5, 6]],
    [[1]],
    [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]],
    [[1, 2], [3]],
    [[3.9, 3], [2, 5]],
    [[True, 0], [0, 1]],
    [["3", "3"], ["2", "5"]],
    "abc",
])
def test_invalid_keys(key):
    with pytest.raises(InvalidKeyError):
        HillCipher(key)


def test_large_entries_reduce_modulo_26():
    big = 52 * 10**9
    cipher = HillCipher([[3 + big, 3], [2, 5 + big]])
    assert cipher.determinant == 9
    assert cipher.key_matrix == KEY_2X2
    assert cipher.encrypt("HELP") == "HIAT"

    huge = HillCipher([[3 + 26 * 10**20, 3 - 26 * 10**30], [-24, 5]])
    assert huge.key_matrix == KEY_2X2
    assert huge.decrypt("HIAT") == "HELP"


def test_huge_non_invertible_key_rejected():
    with pytest.raises(InvalidKeyError):
        HillCipher([[10**20, 3], [2, 5]])


def test_incomplete_block_rejected():
    with pytest.raises(InvalidFormatError):
        HillCipher(KEY_2X2).decrypt("HIA")


def test_blank_input():
    cipher = HillCipher(KEY_2X2)
    assert cipher.encrypt("") == ""
    assert cipher.decrypt("  ") == ""
    assert cipher.decryption_steps("") == []


def test_encryption_steps():
    steps = HillCipher(KEY_2X2).encryption_steps("HELP")
    assert [s.description for s in steps] == [
        "Input", "Prepare Text", "Block 1: HE", "Block 2: LP", "Final Result",
    ]
    assert steps[2].input == "Vector [7, 4]"
    assert steps[2].output == "[7, 8] → HI"
    assert steps[-1].output == "HIAT"


def test_decryption_steps_show_inverse_and_padding():
    cipher = HillCipher(KEY_2X2)
    steps = cipher.decryption_steps(cipher.encrypt("HEL"))
    descriptions = [s.description for s in steps]
    assert descriptions[1] == "Inverse Matrix"
    assert steps[1].output == "[[15, 17], [20, 9]]"
    assert "Remove Padding" in descriptions
    assert steps[-1].output == "HEL"
