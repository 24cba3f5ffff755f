"""CipherEngine facade."""

import pytest

from cipherstep.ciphers import CaesarCipher, HillCipher
from cipherstep.core.engine import CipherEngine, parse_int_key, parse_matrix_key
from cipherstep.core.errors import InvalidKeyError
from cipherstep.core.models import CipherKind, Mode
from shared.config import CiphersConfig, CipherStepConfig
from shared.logger import CipherStepLogger


@pytest.fixture
def engine():
    return CipherEngine(
        CipherStepConfig(),
        logger=CipherStepLogger("engine-test", console_output=False),
    )


def test_run_encrypt(engine):
    result = engine.run("caesar", "encrypt", "HELLO", key="3")
    assert result.ok
    assert result.cipher is CipherKind.CAESAR
    assert result.mode is Mode.ENCRYPT
    assert result.output == "KHOOR"
    assert result.key == "3"
    assert result.steps == []
    assert result.finished_at is not None
    assert result.duration_seconds >= 0


def test_default_key_comes_from_config():
    config = CipherStepConfig(ciphers=CiphersConfig(vigenere_key="KEY"))
    engine = CipherEngine(config, logger=CipherStepLogger("engine-test", console_output=False))
    result = engine.encrypt(CipherKind.VIGENERE, "AAA")
    assert result.key == "KEY"
    assert result.output == "KEY"


@pytest.mark.parametrize("mode", [Mode.ENCRYPT, Mode.DECRYPT])
@pytest.mark.parametrize("kind", list(CipherKind))
def test_trace_output_matches_plain_run(engine, kind, mode):
    text = "Hello World"
    if mode is Mode.DECRYPT:
        text = engine.encrypt(kind, text).output
    plain = engine.run(kind, mode, text)
    traced = engine.run(kind, mode, text, trace=True)
    assert plain.ok
    assert traced.ok
    assert traced.steps
    assert traced.output == plain.output == traced.steps[-1].output


@pytest.mark.parametrize("kind", list(CipherKind))
def test_default_keys_round_trip(engine, kind):
    encrypted = engine.encrypt(kind, "attack at dawn")
    decrypted = engine.decrypt(kind, encrypted.output)
    assert decrypted.ok
    assert decrypted.output.replace(" ", "").upper().startswith("ATTACKATDAWN")


def test_hill_matrix_key_string(engine):
    result = engine.encrypt("hill", "HELP", key="3,3;2,5")
    assert result.output == "HIAT"
    assert result.key == "[[3, 3], [2, 5]]"


def test_invalid_key_is_recorded(engine):
    result = engine.encrypt("hill", "HELP", key="2,4;6,8")
    assert not result.ok
    assert result.error_type == "InvalidKeyError"
    assert "coprime" in result.error
    assert result.output == ""


def test_invalid_format_is_recorded(engine):
    result = engine.decrypt("xor", "0", key="KEY")
    assert result.error_type == "InvalidFormatError"


def test_non_numeric_caesar_key(engine):
    result = engine.encrypt("caesar", "HELLO", key="three")
    assert result.error_type == "InvalidKeyError"


def test_base64_has_no_key(engine):
    result = engine.encrypt("base64", "Hello", key="ignored")
    assert result.key == ""
    assert result.output == "SGVsbG8="


def test_unknown_cipher(engine):
    with pytest.raises(ValueError):
        engine.run("enigma", "encrypt", "HELLO")


def test_unexpected_errors_propagate(engine, monkeypatch):
    def boom(self, text):
        raise RuntimeError("boom")

    monkeypatch.setattr(CaesarCipher, "encrypt", boom)
    with pytest.raises(RuntimeError):
        engine.encrypt("caesar", "HELLO")


def test_build(engine):
    assert isinstance(engine.build("hill", [[3, 3], [2, 5]]), HillCipher)
    with pytest.raises(InvalidKeyError):
        engine.build("transposition", "0")


def test_brute_force(engine):
    result = engine.brute_force("KHOOR")
    assert len(result.candidates) == 25
    assert result.candidates[2].key == 3
    assert result.candidates[2].text == "HELLO"


def test_generate_key_seeded(engine):
    assert engine.generate_key(seed=5) == engine.generate_key(seed=5)
    assert sorted(engine.generate_key()) == list("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def test_generate_key_uses_configured_seed():
    config = CipherStepConfig(ciphers=CiphersConfig(random_seed=11))
    engine = CipherEngine(config, logger=CipherStepLogger("engine-test", console_output=False))
    assert engine.generate_key() == engine.generate_key(seed=11)


def test_result_json_dict(engine):
    data = engine.encrypt("caesar", "HI", key=1, trace=True).to_json_dict()
    assert data["cipher"] == "caesar"
    assert data["mode"] == "encrypt"
    assert data["output"] == "IJ"
    assert data["steps"][0]["step_number"] == 1
    assert isinstance(data["started_at"], str)


def test_parse_int_key():
    assert parse_int_key("Caesar", " 7 ") == 7
    assert parse_int_key("Caesar", -2) == -2
    with pytest.raises(InvalidKeyError):
        parse_int_key("Caesar", "7.5")


def test_parse_matrix_key():
    assert parse_matrix_key("Hill", "3,3;2,5") == [[3, 3], [2, 5]]
    assert parse_matrix_key("Hill", "3 3; 2 5;") == [[3, 3], [2, 5]]
    assert parse_matrix_key("Hill", [[1, 0], [0, 1]]) == [[1, 0], [0, 1]]
    with pytest.raises(InvalidKeyError):
        parse_matrix_key("Hill", "a,b;c,d")
    with pytest.raises(InvalidKeyError):
        parse_matrix_key("Hill", ";")
