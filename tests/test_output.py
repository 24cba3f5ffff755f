"""Console rendering and report generation."""

import json

from cipherstep.ciphers import PlayfairCipher, TranspositionCipher
from cipherstep.core.engine import CipherEngine
from cipherstep.output import CipherConsoleOutput, CipherReportGenerator
from shared.config import CipherStepConfig
from shared.console import CipherStepConsole
from shared.logger import CipherStepLogger


def _engine():
    return CipherEngine(CipherStepConfig(), logger=CipherStepLogger("output-test", console_output=False))


def _recording_output():
    console = CipherStepConsole(record=True)
    return console, CipherConsoleOutput(console)


def test_display_result_and_steps():
    console, output = _recording_output()
    result = _engine().encrypt("caesar", "HELLO", key=3, trace=True)
    output.display_result(result)
    output.display_steps(result.steps)
    text = console.export_text()
    assert "KHOOR" in text
    assert "Step-by-Step Trace" in text


def test_user_text_is_not_parsed_as_markup():
    console, output = _recording_output()
    result = _engine().encrypt("base64", "[bold]x[/bold]")
    output.display_result(result)
    assert "[bold]x[/bold]" in console.export_text()


def test_display_error():
    console, output = _recording_output()
    output.display_result(_engine().decrypt("base64", "@@@@"))
    assert "Invalid Input Format" in console.export_text()


def test_display_steps_one_at_a_time():
    console, output = _recording_output()
    steps = _engine().encrypt("vigenere", "AT", key="LEMON", trace=True).steps
    output.display_steps(steps, delay=0.001)
    text = console.export_text()
    assert "Step 1: Initialization" in text
    assert "Step 4: Final Result" in text


def test_display_empty_trace():
    console, output = _recording_output()
    output.display_steps([])
    assert "No steps" in console.export_text()


def test_key_visualisations():
    console, output = _recording_output()
    output.display_playfair_square(PlayfairCipher("PLAYFAIR").key_square, "PLAYFAIR")
    output.display_matrix([[3, 3], [2, 5]])
    output.display_grid(TranspositionCipher(4).grid("HELLO"))
    output.display_brute_force(_engine().brute_force("KHOOR"))
    text = console.export_text()
    assert "Playfair Key Square" in text
    assert "Key Matrix" in text
    assert "Transposition Grid" in text
    assert "HELLO" in text


def test_matrix_title_is_not_wrapped():
    console, output = _recording_output()
    output.display_matrix([[15, 17], [20, 9]], title="Inverse Matrix K^-1 (mod 26)")
    assert "Inverse Matrix K^-1 (mod 26)" in console.export_text()


def test_json_report(tmp_path):
    result = _engine().encrypt("xor", "HELLO", key="KEY", trace=True)
    path = CipherReportGenerator().generate_json(result, tmp_path / "out" / "xor.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["report_metadata"]["tool"] == "cipherstep"
    assert data["summary"]["step_count"] == 7
    assert data["result"]["output"] == "03 00 15 07 0A"


def test_html_report_escapes_input(tmp_path):
    result = _engine().encrypt("caesar", "<script>", key=1, trace=True)
    path = CipherReportGenerator().generate_html(result, tmp_path / "caesar.html")
    html = path.read_text(encoding="utf-8")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "&lt;tdsjqu&gt;" in html
    assert "Step-by-Step Trace" in html


def test_html_report_for_error(tmp_path):
    result = _engine().encrypt("hill", "HELP", key="2,4;6,8")
    html = CipherReportGenerator().generate_html(result, tmp_path / "hill.html").read_text(encoding="utf-8")
    assert "InvalidKeyError" in html
