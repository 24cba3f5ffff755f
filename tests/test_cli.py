"""Click command-line interface."""

import json

import pytest
from click.testing import CliRunner

from cipherstep.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def _json(result):
    return json.loads(result.output)


def test_encrypt_console(runner):
    result = runner.invoke(cli, ["-q", "encrypt", "caesar", "HELLO", "--key", "3"])
    assert result.exit_code == 0, result.output
    assert "KHOOR" in result.output


def test_banner_shown_without_quiet(runner):
    result = runner.invoke(cli, ["encrypt", "caesar", "HELLO"])
    assert result.exit_code == 0
    assert "Version: 1.0.0" in result.output


def test_encrypt_json(runner):
    result = runner.invoke(cli, ["-o", "json", "encrypt", "caesar", "HELLO", "-k", "3"])
    assert result.exit_code == 0
    assert _json(result)["result"]["output"] == "KHOOR"


def test_cipher_name_is_case_insensitive(runner):
    result = runner.invoke(cli, ["-o", "json", "encrypt", "BASE64", "Hello"])
    assert _json(result)["result"]["output"] == "SGVsbG8="


def test_decrypt_hill_json(runner):
    result = runner.invoke(cli, ["-o", "json", "decrypt", "hill", "HIAT", "-k", "3,3;2,5", "--trace"])
    data = _json(result)
    assert data["result"]["output"] == "HELP"
    assert data["result"]["steps"][1]["description"] == "Inverse Matrix"


def test_trace_console(runner):
    result = runner.invoke(cli, ["-q", "encrypt", "playfair", "HELLO", "-k", "PLAYFAIR", "--trace"])
    assert result.exit_code == 0
    assert "KGYVRV" in result.output
    assert "Playfair Key Square" in result.output
    assert "Step-by-Step Trace" in result.output


def test_hill_trace_console_shows_matrices(runner):
    result = runner.invoke(cli, ["-q", "decrypt", "hill", "HIAT", "-k", "3,3;2,5", "--trace"])
    assert result.exit_code == 0
    assert "Key Matrix K" in result.output
    assert "Inverse Matrix K^-1 (mod 26)" in result.output


def test_trace_with_delay(runner):
    result = runner.invoke(cli, ["-q", "encrypt", "caesar", "AB", "--trace", "--delay", "0.001"])
    assert result.exit_code == 0
    assert "Final Result" in result.output


def test_invalid_format_exits_nonzero(runner):
    result = runner.invoke(cli, ["-q", "decrypt", "xor", "0", "-k", "KEY"])
    assert result.exit_code == 1
    assert "Invalid Input Format" in result.output


def test_invalid_key_exits_nonzero(runner):
    result = runner.invoke(cli, ["-q", "encrypt", "monoalphabetic", "HELLO", "-k", "ABC"])
    assert result.exit_code == 1
    assert "Invalid Key" in result.output


def test_unknown_cipher(runner):
    result = runner.invoke(cli, ["encrypt", "enigma", "HELLO"])
    assert result.exit_code == 2


def test_config_file_sets_default_key(runner, tmp_path):
    path = tmp_path / "c.toml"
    path.write_text("[ciphers]\ncaesar_shift = 1\n", encoding="utf-8")
    result = runner.invoke(cli, ["-c", str(path), "-o", "json", "encrypt", "caesar", "A"])
    assert _json(result)["result"]["output"] == "B"


def test_html_report(runner, tmp_path):
    out = tmp_path / "report.html"
    result = runner.invoke(cli, ["-o", "html", "-f", str(out), "encrypt", "vigenere", "ATTACK", "--trace"])
    assert result.exit_code == 0
    assert "LXFOPV" in out.read_text(encoding="utf-8")


def test_json_report_file(runner, tmp_path):
    out = tmp_path / "report.json"
    result = runner.invoke(cli, ["-o", "json", "-f", str(out), "encrypt", "xor", "HELLO"])
    assert result.exit_code == 0
    assert json.loads(out.read_text(encoding="utf-8"))["result"]["output"] == "03 00 15 07 0A"


def test_brute_force(runner):
    result = runner.invoke(cli, ["-q", "brute-force", "KHOOR"])
    assert result.exit_code == 0
    assert "HELLO" in result.output

    data = _json(runner.invoke(cli, ["-o", "json", "brute-force", "KHOOR"]))
    assert len(data["candidates"]) == 25


def test_brute_force_rejects_html(runner):
    result = runner.invoke(cli, ["-o", "html", "brute-force", "KHOOR"])
    assert result.exit_code == 2


def test_keygen_seeded(runner):
    first = _json(runner.invoke(cli, ["-o", "json", "keygen", "--seed", "42"]))
    second = _json(runner.invoke(cli, ["-o", "json", "keygen", "--seed", "42"]))
    assert first["key"] == second["key"]
    assert sorted(first["key"]) == list("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def test_keygen_console(runner):
    result = runner.invoke(cli, ["-q", "keygen", "-s", "1"])
    assert result.exit_code == 0
    assert "Key: " in result.output


def test_square(runner):
    data = _json(runner.invoke(cli, ["-o", "json", "square", "PLAYFAIR"]))
    assert data["square"][0] == ["P", "L", "A", "Y", "F"]

    result = runner.invoke(cli, ["-q", "square", "PLAYFAIR"])
    assert "Playfair Key Square" in result.output


def test_grid(runner):
    data = _json(runner.invoke(cli, ["-o", "json", "grid", "WE ARE DISCOVERED", "-n", "4"]))
    assert data["grid"][0] == ["W", "E", "A", "R"]
    assert data["cipher_text"] == "WECREDOEAIVDRSEX"


def test_grid_invalid_columns(runner):
    result = runner.invoke(cli, ["-q", "grid", "HELLO", "-n", "0"])
    assert result.exit_code == 1


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert "1.0.0" in result.output


def test_quiet_hides_banner(runner):
    result = runner.invoke(cli, ["-q", "encrypt", "caesar", "HELLO"])
    assert "Version: 1.0.0" not in result.output
