import json
from typing import Sequence, Tuple

import click
from jinja2 import Template

from .runner import Result

# process-wide display settings
LABEL_WIDTH = 48
DIVIDER_WIDTH = 64
PASS_COLOR = "green"
FAIL_COLOR = "red"
MUTED_COLOR = "bright_black"

HTML_TMPL = r"""
<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <title>PokeAPI Test Report</title>
  <style>
    body{font-family:Arial,Helvetica,sans-serif;margin:16px;color:#222}
    .summary{margin-bottom:20px;padding:12px;background:#f2f8ff;border:1px solid #cfe0ff}
    table{border-collapse:collapse;width:100%}
    td,th{padding:6px 10px;border-bottom:1px solid #eee;text-align:left}
    .ok{color:green;font-weight:600}
    .fail{color:red;font-weight:700}
    .meta{font-size:12px;color:#666}
  </style>
</head>
<body>
  <h1>PokeAPI Test Report</h1>
  <div class="summary">
    <div>Total tests: {{ total }}</div>
    <div>{{ summary }}</div>
  </div>
  <table>
    <tr><th>Status</th><th>Test</th><th>Duration</th><th>Error</th></tr>
    {% for r in results %}
    <tr>
      <td>{% if r.passed %}<span class="ok">PASS</span>{% else %}<span class="fail">FAIL</span>{% endif %}</td>
      <td>{{ r.label }}</td>
      <td class="meta">{{ "%.1f"|format(r.duration_ms) }} ms</td>
      <td>{% if r.error %}<pre>{{ r.error }}</pre>{% endif %}</td>
    </tr>
    {% endfor %}
  </table>
</body>
</html>
"""


def pad_right(text: str, width: int) -> str:
    """Pad with spaces up to width; longer text is left as is."""
    return text + " " * max(0, width - len(text))


def _counts(results: Sequence[Result]) -> Tuple[int, int, int]:
    """(total, passed, failed)"""
    total = len(results)
    passed = sum(1 for r in results if r.passed)
    return total, passed, total - passed


def format_summary(results: Sequence[Result]) -> str:
    total, passed, failed = _counts(results)
    if failed:
        return f"{failed} failed, {passed} passed"
    return f"{passed}/{total} passed"


def print_results(results: Sequence[Result], label_width: int = LABEL_WIDTH, divider_width: int = DIVIDER_WIDTH):
    """Display results as an aligned table followed by a summary line."""
    divider = click.style("-" * divider_width, fg=MUTED_COLOR)
    click.echo(divider)

    for r in results:
        if r.passed:
            status = click.style("[PASS]", fg=PASS_COLOR)
        else:
            status = click.style("[FAIL]", fg=FAIL_COLOR)
        label = pad_right(r.label, label_width)
        elapsed = click.style(f"{r.duration_ms:.1f}ms", fg=MUTED_COLOR)
        click.echo(f"{status} {label} {elapsed}")
        click.echo(divider)

    total, passed, failed = _counts(results)
    if failed:
        summary = (click.style(f"{failed} failed", fg=FAIL_COLOR) + ", "
                   + click.style(f"{passed} passed", fg=PASS_COLOR))
    else:
        summary = click.style(f"{passed}/{total} passed", fg=PASS_COLOR)
    click.echo(summary)
    click.echo()


def print_failures(results: Sequence[Result]):
    """Verbose detail for failed cases."""
    failures = [r for r in results if not r.passed]
    if not failures:
        return
    click.echo("Failures detail:")
    for r in failures:
        click.echo(f"- {r.label}")
        if r.error:
            click.echo(f"  Reason: {r.error}")
        else:
            click.echo("  Reason: check returned a falsy value")


def write_json_report(results: Sequence[Result], out_path: str):
    total, passed, _ = _counts(results)
    report = {
        "total": total,
        "passed": passed,
        "summary": format_summary(results),
        "results": [r.to_dict() for r in results],
    }
    with open(out_path, "w", encoding="utf-8") as fh:
        json.dump(report, fh, indent=2, ensure_ascii=False)


def generate_html_report(results: Sequence[Result], out_path: str):
    """Render the results table to a standalone HTML file."""
    tmpl = Template(HTML_TMPL, autoescape=True)
    html = tmpl.render(results=results, total=len(results), summary=format_summary(results))
    with open(out_path, "w", encoding="utf-8") as fh:
        fh.write(html)
