"""Playfair cipher."""

import pytest

from cipherstep.ciphers import PlayfairCipher
from cipherstep.core.errors import InvalidFormatError


@pytest.fixture
def cipher():
    return PlayfairCipher("PLAYFAIR")


def test_key_square(cipher):
    assert cipher.key_square == (
        ("P", "L", "A", "Y", "F"),
        ("I", "R", "B", "C", "D"),
        ("E", "G", "H", "K", "M"),
        ("N", "O", "Q", "S", "T"),
        ("U", "V", "W", "X", "Z"),
    )


def test_square_has_25_distinct_letters_without_j():
    for key in ("", "PLAYFAIR", "jackdaws love my big sphinx", "123"):
        letters = [ch for row in PlayfairCipher(key).key_square for ch in row]
        assert len(letters) == 25
        assert len(set(letters)) == 25
        assert "J" not in letters


def test_empty_key_gives_alphabetical_square():
    assert PlayfairCipher("").key_square[0] == ("A", "B", "C", "D", "E")


def test_j_is_looked_up_as_i(cipher):
    assert cipher.position("J") == cipher.position("I") == (1, 0)


def test_prepare_text():
    assert PlayfairCipher.prepare_text("HELLO") == "HELXLO"
    assert PlayfairCipher.prepare_text("balloon") == "BALXLOON"
    assert PlayfairCipher.prepare_text("ABC") == "ABCX"
    assert PlayfairCipher.prepare_text("jam") == "IAMX"


def test_repeated_x_uses_q_filler():
    assert PlayfairCipher.prepare_text("XX") == "XQXQ"
    assert PlayfairCipher.prepare_text("FOX") == "FOXQ"
    assert PlayfairCipher.prepare_text("TAXXI") == "TAXQXI"
    for text in ("XX", "XXX", "box", "taxxi"):
        prepared = PlayfairCipher.prepare_text(text)
        assert all(prepared[i] != prepared[i + 1] for i in range(0, len(prepared), 2)), text


def test_encrypt_known_answer(cipher):
    assert cipher.encrypt("HELLO") == "KGYVRV"


def test_decrypt_known_answer(cipher):
    assert cipher.decrypt("KGYVRV") == "HELXLO"
    assert cipher.decrypt("kg yv rv") == "HELXLO"


@pytest.mark.parametrize("text", ["HELLO", "balloon", "Hide the gold in the tree stump", "JJ", "XX", "fox"])
def test_round_trip_yields_prepared_text(cipher, text):
    assert cipher.decrypt(cipher.encrypt(text)) == PlayfairCipher.prepare_text(text)


def test_odd_cipher_text_rejected(cipher):
    with pytest.raises(InvalidFormatError):
        cipher.decrypt("KGY")


def test_blank_input(cipher):
    assert cipher.encrypt("  ") == ""
    assert cipher.decrypt("") == ""
    assert cipher.encryption_steps("") == []


def test_encryption_steps(cipher):
    steps = cipher.encryption_steps("HELLO")
    assert [s.description for s in steps] == [
        "Input", "Prepare Text", "Pair 1: HE", "Pair 2: LX", "Pair 3: LO", "Final Result",
    ]
    assert steps[1].output == "HELXLO"
    assert steps[2].output == "KG"
    assert steps[2].explanation == "Same row: shift right"
    assert steps[3].explanation == "Rectangle: swap columns"
    assert steps[4].output == "RV"
    assert steps[4].explanation == "Same column: shift down"
    assert steps[-1].output == "KGYVRV"


def test_encryption_steps_show_padding(cipher):
    steps = cipher.encryption_steps("ABC")
    padding = [s for s in steps if s.description == "Add Padding"]
    assert len(padding) == 1
    assert padding[0].output == "ABCX"


def test_decryption_steps(cipher):
    steps = cipher.decryption_steps("KGYVRV")
    assert steps[1].description == "Pair 1: KG"
    assert steps[1].explanation == "Same row: shift left"
    assert steps[2].explanation == "Rectangle: swap columns"
    assert steps[-1].output == "HELXLO"
