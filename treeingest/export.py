"""Render scan results as prompt-ready documents.

Three formats share one ``ScanResult``: a plain-text document for pasting
into a model prompt, a minimal HTML page, and JSON. File bodies in the
result are already markup-escaped; the text format unescapes them, the HTML
format embeds them verbatim.
"""

from __future__ import annotations

import html
import json
import re
from datetime import datetime
from functools import lru_cache
from pathlib import PurePosixPath

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from .aggregate import ScanResult
from .formatting import format_number, format_size

SECTION_RULE = "=" * 48
_BACKTICK_RUN_RE = re.compile(r"`{3,}")


@lru_cache(maxsize=512)
def language_for_path(path: str) -> str:
    """Return the Pygments alias for ``path``'s file name, or ``""``."""
    try:
        lexer = get_lexer_for_filename(PurePosixPath(path).name)
    except ClassNotFound:
        return ""
    return lexer.aliases[0] if lexer.aliases else ""


def _fence_for(body: str) -> str:
    """Return a backtick fence longer than any run inside ``body``."""
    longest = max((len(match.group(0)) for match in _BACKTICK_RUN_RE.finditer(body)), default=2)
    return "`" * (longest + 1)


def summary_lines(result: ScanResult) -> list[str]:
    summary = result.summary
    return [
        f"Files analyzed: {format_number(summary.file_count)}",
        f"Size: {format_size(summary.total_size)}",
        f"Estimated Tokens: {format_number(summary.estimated_tokens)}",
    ]


def render_text_document(result: ScanResult) -> str:
    """Render summary, tree, and unescaped file bodies as plain text."""
    parts: list[str] = ["Summary:", *summary_lines(result), "", result.structure.rstrip("\n"), ""]
    for record in result.contents:
        body = html.unescape(record.content)
        fence = _fence_for(body)
        parts.extend(
            [
                SECTION_RULE,
                f"File: {record.path}",
                SECTION_RULE,
                f"{fence}{language_for_path(record.path)}",
                body.rstrip("\n"),
                fence,
                "",
            ]
        )
    return "\n".join(parts)


def render_html_document(result: ScanResult, generated_at: datetime | None = None) -> str:
    """Render an unstyled HTML page; bodies are embedded without re-escaping."""
    title = html.escape(result.root.name) if result.root is not None else "treeingest"
    items = "\n".join(f'    <div class="summary-item">{html.escape(line)}</div>' for line in summary_lines(result))
    sections = "\n".join(
        f'  <h2>{html.escape(record.path)}</h2>\n  <pre class="file-content">{record.content}</pre>'
        for record in result.contents
    )
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '  <meta charset="utf-8">',
        f"  <title>{title}</title>",
        "</head>",
        "<body>",
        "  <h1>Summary</h1>",
        '  <div class="summary-container">',
        items,
        "  </div>",
        "  <h1>Directory Structure</h1>",
        f'  <pre id="structure">{html.escape(result.structure)}</pre>',
    ]
    if sections:
        lines.extend(["  <h1>Files</h1>", sections])
    if generated_at is not None:
        lines.append(f'  <div class="timestamp">Updated {generated_at.strftime("%H:%M:%S")}</div>')
    lines.extend(["</body>", "</html>", ""])
    return "\n".join(lines)


def render_json_document(result: ScanResult) -> str:
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False) + "\n"


def render_document(result: ScanResult, fmt: str, generated_at: datetime | None = None) -> str:
    """Dispatch to the renderer for ``fmt`` (``text``, ``html``, or ``json``)."""
    if fmt == "text":
        return render_text_document(result)
    if fmt == "html":
        return render_html_document(result, generated_at=generated_at)
    if fmt == "json":
        return render_json_document(result)
    raise ValueError(f"unknown export format: {fmt!r}")


__all__ = [
    "language_for_path",
    "render_document",
    "render_html_document",
    "render_json_document",
    "render_text_document",
    "summary_lines",
]
