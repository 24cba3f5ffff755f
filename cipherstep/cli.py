"""
CipherStep CLI
===============

Click-based command-line interface for CipherStep. Provides subcommands
to encrypt and decrypt with any supported cipher (optionally showing the
step-by-step trace), brute-force a Caesar cipher text, generate a random
substitution key, and visualise Playfair squares and transposition grids.

Usage::

    python -m cipherstep encrypt caesar "HELLO" --key 3
    python -m cipherstep decrypt hill "HIAT" --key "3,3;2,5" --trace
    python -m cipherstep encrypt playfair "HELLO" --key PLAYFAIR --trace --delay 0.5
    python -m cipherstep brute-force "KHOOR"
    python -m cipherstep keygen --seed 42
    python -m cipherstep square PLAYFAIR
    python -m cipherstep grid "WE ARE DISCOVERED" --columns 4
    python -m cipherstep -o json encrypt xor "HELLO" --key KEY

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import click
from rich.text import Text

from shared.config import CipherStepConfig
from shared.console import CipherStepConsole
from shared.math_utils import ALPHABET

from cipherstep import __version__
from cipherstep.ciphers import HillCipher, PlayfairCipher, TranspositionCipher
from cipherstep.core.engine import CipherEngine
from cipherstep.core.errors import CipherError
from cipherstep.core.models import CipherKind, Mode, TransformResult
from cipherstep.output.console import CipherConsoleOutput
from cipherstep.output.report import CipherReportGenerator

_CIPHER_CHOICES = [kind.value for kind in CipherKind]


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to CipherStep configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner.",
)
@click.version_option(__version__, prog_name="cipherstep")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """CipherStep -- Classical Ciphers, One Step at a Time.

    Encrypt and decrypt with Caesar, Monoalphabetic, Vigenère, Playfair,
    Hill, Columnar Transposition, XOR and Base64, and watch every step.
    """
    ctx.ensure_object(dict)

    step_config = CipherStepConfig.load(config) if config else CipherStepConfig()
    ctx.obj["config"] = step_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = CipherStepConsole()
    ctx.obj["console"] = console
    ctx.obj["engine"] = CipherEngine(step_config)
    ctx.obj["display"] = CipherConsoleOutput(console)
    ctx.obj["reporter"] = CipherReportGenerator()

    if not quiet and output == "console":
        console.banner(version=__version__)


def _emit_json(ctx: click.Context, data: Any) -> None:
    """Print *data* as JSON, or write it to ``--output-file``."""
    text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    output_file = ctx.obj["output_file"]
    if output_file:
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        ctx.obj["console"].success(f"JSON saved to: {path}")
    else:
        click.echo(text)


def _require_structured_output(ctx: click.Context, command: str) -> None:
    if ctx.obj["output_format"] == "html":
        raise click.UsageError(
            f"HTML output is only available for encrypt and decrypt, not {command}."
        )


def _handle_output(ctx: click.Context, result: TransformResult) -> None:
    """Write *result* in the selected non-console format."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: CipherReportGenerator = ctx.obj["reporter"]
    console: CipherStepConsole = ctx.obj["console"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(json.dumps(
                reporter.build_json(result),
                indent=2,
                ensure_ascii=False,
                default=str,
            ))
    elif output_format == "html":
        if output_file:
            path = Path(output_file)
        else:
            output_dir = Path(ctx.obj["config"].global_settings.output_dir)
            path = output_dir / f"cipherstep_{result.cipher.value}_{result.mode.value}.html"
        path = reporter.generate_html(result, path)
        console.success(f"HTML report saved to: {path}")


def _display_key_material(
    ctx: click.Context, result: TransformResult, key: Optional[str]
) -> None:
    """Show the key square, matrix or grid behind a traced transform."""
    engine: CipherEngine = ctx.obj["engine"]
    display: CipherConsoleOutput = ctx.obj["display"]
    cipher = engine.build(result.cipher, key)

    if isinstance(cipher, PlayfairCipher):
        display.display_playfair_square(cipher.key_square, cipher.keyword)
    elif isinstance(cipher, HillCipher):
        display.display_matrix(cipher.key_matrix, title="Key Matrix K")
        if result.mode is Mode.DECRYPT:
            display.display_matrix(cipher.inverse_matrix, title="Inverse Matrix K^-1 (mod 26)")
    elif isinstance(cipher, TranspositionCipher) and result.mode is Mode.ENCRYPT and result.input.strip():
        display.display_grid(cipher.grid(result.input))


def _transform(
    ctx: click.Context,
    mode: Mode,
    cipher: str,
    text: str,
    key: Optional[str],
    trace: bool,
    delay: Optional[float],
) -> None:
    engine: CipherEngine = ctx.obj["engine"]
    display: CipherConsoleOutput = ctx.obj["display"]

    result = engine.run(cipher, mode, text, key=key, trace=trace)

    if ctx.obj["output_format"] == "console":
        display.display_result(result)
        if trace and result.ok:
            _display_key_material(ctx, result, key)
            if delay is None:
                delay = ctx.obj["config"].ciphers.step_delay
            display.display_steps(result.steps, delay=delay)
    else:
        _handle_output(ctx, result)

    if not result.ok:
        ctx.exit(1)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

_trace_option = click.option(
    "--trace", "-t",
    is_flag=True,
    default=False,
    help="Show the step-by-step trace.",
)
_key_option = click.option(
    "--key", "-k",
    default=None,
    help="Key material (shift, keyword, '3,3;2,5' matrix, column count). "
         "Defaults to the configured key.",
)
_delay_option = click.option(
    "--delay", "-d",
    type=click.FloatRange(min=0.0),
    default=None,
    help="Seconds to pause between revealed steps (with --trace).",
)


@cli.command()
@click.argument("cipher", type=click.Choice(_CIPHER_CHOICES, case_sensitive=False))
@click.argument("text")
@_key_option
@_trace_option
@_delay_option
@click.pass_context
def encrypt(
    ctx: click.Context,
    cipher: str,
    text: str,
    key: Optional[str],
    trace: bool,
    delay: Optional[float],
) -> None:
    """Encrypt TEXT with CIPHER (Base64: encode)."""
    _transform(ctx, Mode.ENCRYPT, cipher.lower(), text, key, trace, delay)


@cli.command()
@click.argument("cipher", type=click.Choice(_CIPHER_CHOICES, case_sensitive=False))
@click.argument("text")
@_key_option
@_trace_option
@_delay_option
@click.pass_context
def decrypt(
    ctx: click.Context,
    cipher: str,
    text: str,
    key: Optional[str],
    trace: bool,
    delay: Optional[float],
) -> None:
    """Decrypt TEXT with CIPHER (Base64: decode)."""
    _transform(ctx, Mode.DECRYPT, cipher.lower(), text, key, trace, delay)


@cli.command("brute-force")
@click.argument("text")
@click.pass_context
def brute_force(ctx: click.Context, text: str) -> None:
    """Try all 25 Caesar shifts on TEXT."""
    _require_structured_output(ctx, "brute-force")
    engine: CipherEngine = ctx.obj["engine"]
    result = engine.brute_force(text)

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_brute_force(result)
    else:
        _emit_json(ctx, result.model_dump(mode="json"))


@cli.command()
@click.option(
    "--seed", "-s",
    type=int,
    default=None,
    help="Seed for a reproducible key.",
)
@click.pass_context
def keygen(ctx: click.Context, seed: Optional[int]) -> None:
    """Generate a random Monoalphabetic substitution key."""
    _require_structured_output(ctx, "keygen")
    engine: CipherEngine = ctx.obj["engine"]
    key = engine.generate_key(seed)

    if ctx.obj["output_format"] == "console":
        console: CipherStepConsole = ctx.obj["console"]
        console.section("Monoalphabetic Key")
        console.table(
            "Substitution Table",
            ["", "Letters"],
            [["Plain", " ".join(ALPHABET)], ["Cipher", " ".join(key)]],
            styles=["bold", "cs.letter"],
        )
        console.success(f"Key: {key}")
    else:
        _emit_json(ctx, {"key": key, "seed": seed})


@cli.command()
@click.argument("key")
@click.pass_context
def square(ctx: click.Context, key: str) -> None:
    """Show the Playfair key square built from KEY."""
    _require_structured_output(ctx, "square")
    cipher = PlayfairCipher(key)

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_playfair_square(cipher.key_square, cipher.keyword)
    else:
        _emit_json(ctx, {
            "keyword": cipher.keyword,
            "square": [list(row) for row in cipher.key_square],
        })


@cli.command()
@click.argument("text")
@click.option(
    "--columns", "-n",
    type=int,
    default=None,
    help="Number of columns (defaults to the configured value).",
)
@click.pass_context
def grid(ctx: click.Context, text: str, columns: Optional[int]) -> None:
    """Show the Columnar Transposition grid for TEXT."""
    _require_structured_output(ctx, "grid")
    console: CipherStepConsole = ctx.obj["console"]
    if columns is None:
        columns = ctx.obj["config"].ciphers.transposition_columns

    try:
        cipher = TranspositionCipher(columns)
    except CipherError as exc:
        console.error(exc.reason)
        ctx.exit(1)
        return

    rows = cipher.grid(text) if text.strip() else []
    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_grid(rows)
        console.print(Text(f"Cipher text: {cipher.encrypt(text)}", style="cs.info"))
    else:
        _emit_json(ctx, {
            "columns": columns,
            "grid": rows,
            "cipher_text": cipher.encrypt(text),
        })


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the CipherStep CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
