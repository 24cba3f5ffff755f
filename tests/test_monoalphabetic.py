"""Monoalphabetic substitution cipher."""

import random

import pytest

from cipherstep.ciphers import MonoalphabeticCipher
from cipherstep.core.errors import InvalidKeyError
from shared.math_utils import ALPHABET

KEY = "QWERTYUIOPASDFGHJKLZXCVBNM"


def test_encrypt_known_answer():
    assert MonoalphabeticCipher(KEY).encrypt("HELLO") == "ITSSG"


def test_case_is_preserved_and_key_is_case_insensitive():
    cipher = MonoalphabeticCipher(KEY.lower())
    assert cipher.key == KEY
    assert cipher.encrypt("Hello, World") == "Itssg, Vgksr"
    assert cipher.decrypt("Itssg, Vgksr") == "Hello, World"


def test_maps_are_inverse():
    cipher = MonoalphabeticCipher(KEY)
    for plain, enc in cipher.encryption_map.items():
        assert cipher.decryption_map[enc] == plain


def test_maps_are_read_only():
    cipher = MonoalphabeticCipher(KEY)
    with pytest.raises(TypeError):
        cipher.encryption_map["A"] = "B"


@pytest.mark.parametrize("key", [
    "",
    "ABC",
    "AACDEFGHIJKLMNOPQRSTUVWXYZ",
    "ABCDEFGHIJKLMNOPQRSTUVWXY1",
    KEY + "A",
])
def test_invalid_keys(key):
    with pytest.raises(InvalidKeyError):
        MonoalphabeticCipher(key)


def test_generate_random_key_is_permutation():
    key = MonoalphabeticCipher.generate_random_key()
    assert sorted(key) == list(ALPHABET)


def test_generate_random_key_seeded_is_reproducible():
    a = MonoalphabeticCipher.generate_random_key(random.Random(42))
    b = MonoalphabeticCipher.generate_random_key(random.Random(42))
    assert a == b
    MonoalphabeticCipher(a)


def test_round_trip_with_random_key():
    cipher = MonoalphabeticCipher(MonoalphabeticCipher.generate_random_key(random.Random(7)))
    text = "Pack my box with five dozen liquor jugs!"
    assert cipher.decrypt(cipher.encrypt(text)) == text


def test_steps():
    cipher = MonoalphabeticCipher(KEY)
    steps = cipher.encryption_steps("Hi!")
    assert [s.description for s in steps] == [
        "Initialization", "Map 'H'", "Map 'i'", "Process '!'", "Final Result",
    ]
    assert steps[-1].output == cipher.encrypt("Hi!")
    assert cipher.decryption_steps("Io!")[-1].output == cipher.decrypt("Io!")
    assert cipher.encryption_steps("  ") == []


def test_every_letter_round_trips():
    cipher = MonoalphabeticCipher(KEY)
    encrypted = cipher.encrypt(ALPHABET)
    assert sorted(encrypted) == list(ALPHABET)
    for letter in ALPHABET:
        assert cipher.decrypt(cipher.encrypt(letter)) == letter
