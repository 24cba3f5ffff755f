"""
CipherStep Report Generator
============================

Writes a :class:`TransformResult` to disk as JSON or as a self-contained
HTML page. The HTML report uses inline CSS so it can be opened offline
or handed in as coursework; the JSON report is the same data in
machine-readable form.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from cipherstep import __version__
from cipherstep.core.models import Mode, TransformResult


# ===================================================================== #
#  HTML Template (Inline -- no Jinja2 dependency required)
# ===================================================================== #

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>CipherStep Report - {title}</title>
    <style>
        :root {{
            --bg-primary: #0d1117;
            --bg-secondary: #161b22;
            --bg-tertiary: #21262d;
            --text-primary: #c9d1d9;
            --text-secondary: #8b949e;
            --accent-cyan: #58a6ff;
            --accent-green: #3fb950;
            --accent-red: #f85149;
            --accent-purple: #bc8cff;
            --border: #30363d;
        }}
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            line-height: 1.6;
            padding: 2rem;
        }}
        .container {{ max-width: 1200px; margin: 0 auto; }}
        .header {{
            text-align: center;
            padding: 2rem;
            border: 1px solid var(--accent-cyan);
            border-radius: 8px;
            margin-bottom: 2rem;
            background: var(--bg-secondary);
        }}
        .header h1 {{ color: var(--accent-cyan); font-size: 2rem; }}
        .header .subtitle {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .section {{
            background: var(--bg-secondary);
            border: 1px solid var(--border);
            border-radius: 8px;
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        .section h2 {{
            color: var(--accent-purple);
            font-size: 1.4rem;
            margin-bottom: 1rem;
            padding-bottom: 0.5rem;
            border-bottom: 1px solid var(--border);
        }}
        table {{ width: 100%; border-collapse: collapse; margin: 1rem 0; }}
        th, td {{
            padding: 0.6rem 0.9rem;
            text-align: left;
            border: 1px solid var(--border);
            vertical-align: top;
        }}
        th {{ background: var(--bg-tertiary); color: var(--accent-cyan); font-weight: 600; }}
        tr:nth-child(even) {{ background: var(--bg-tertiary); }}
        td.mono, pre {{ font-family: 'SFMono-Regular', Consolas, monospace; white-space: pre-wrap; }}
        .output {{ color: var(--accent-green); font-weight: 700; }}
        .error {{ color: var(--accent-red); font-weight: 700; }}
        .explanation {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .footer {{
            text-align: center;
            padding: 1.5rem;
            color: var(--text-secondary);
            font-size: 0.8rem;
            border-top: 1px solid var(--border);
            margin-top: 2rem;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>CipherStep :: {cipher}</h1>
            <div class="subtitle">
                {mode} | Generated: {timestamp}
            </div>
        </div>

        <div class="section">
            <h2>Summary</h2>
            <table>
                <tr><th>{in_label}</th><td class="mono">{input}</td></tr>
                <tr><th>Key</th><td class="mono">{key}</td></tr>
                <tr><th>{out_label}</th><td class="mono {out_class}">{output}</td></tr>
                <tr><th>Duration</th><td>{duration}</td></tr>
            </table>
        </div>

        {steps_section}

        <div class="footer">
            CipherStep v{version} | Classical Ciphers, One Step at a Time<br>
            Report generated {timestamp}
        </div>
    </div>
</body>
</html>
"""


class CipherReportGenerator:
    """Generates HTML and JSON reports from CipherStep transform results.

    Usage::

        generator = CipherReportGenerator()
        generator.generate_html(result, Path("playfair.html"))
        generator.generate_json(result, Path("playfair.json"))
    """

    def generate_html(
        self,
        result: TransformResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write *result* as an HTML page and return the path written."""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        encrypting = result.mode is Mode.ENCRYPT

        if result.ok:
            output_html = self._escape_html(result.output)
            out_class = "output"
        else:
            output_html = self._escape_html(f"{result.error_type}: {result.error}")
            out_class = "error"

        duration = result.duration_seconds
        html_content = _HTML_TEMPLATE.format(
            title=self._escape_html(title or f"{result.cipher.label} {result.mode.value}"),
            cipher=self._escape_html(result.cipher.label),
            mode=result.mode.value.title(),
            timestamp=timestamp,
            in_label="Plain Text" if encrypting else "Cipher Text",
            out_label="Cipher Text" if encrypting else "Plain Text",
            input=self._escape_html(result.input),
            key=self._escape_html(result.key) or "&mdash;",
            output=output_html,
            out_class=out_class,
            duration=f"{duration:.3f}s" if duration is not None else "n/a",
            steps_section=self._build_steps_html(result),
            version=__version__,
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return output_path

    def generate_json(self, result: TransformResult, output_path: Path) -> Path:
        """Write *result* as a JSON document and return the path written."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(self.build_json(result), indent=2, ensure_ascii=False, default=str),
            encoding="utf-8",
        )
        return output_path

    def build_json(self, result: TransformResult) -> dict[str, Any]:
        """The JSON report as a dictionary."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "cipherstep",
                "version": __version__,
            },
            "summary": {
                "cipher": result.cipher.value,
                "mode": result.mode.value,
                "ok": result.ok,
                "step_count": len(result.steps),
                "duration_seconds": result.duration_seconds,
            },
            "result": result.to_json_dict(),
        }

    # ------------------------------------------------------------------ #
    #  Private HTML Builders
    # ------------------------------------------------------------------ #

    def _build_steps_html(self, result: TransformResult) -> str:
        if not result.steps:
            return ""

        rows = "\n".join(
            "<tr>"
            f"<td>{step.step_number}</td>"
            f"<td>{self._escape_html(step.description)}</td>"
            f'<td class="mono">{self._escape_html(step.input)}</td>'
            f'<td class="mono output">{self._escape_html(step.output)}</td>'
            f'<td class="explanation">{self._escape_html(step.explanation or "")}</td>'
            "</tr>"
            for step in result.steps
        )
        return (
            '<div class="section">'
            "  <h2>Step-by-Step Trace</h2>"
            "  <table>"
            "    <tr><th>#</th><th>Step</th><th>Input</th><th>Output</th><th>Explanation</th></tr>"
            f"    {rows}"
            "  </table>"
            "</div>"
        )

    @staticmethod
    def _escape_html(text: str) -> str:
        return (
            text.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("'", "&#x27;")
        )
