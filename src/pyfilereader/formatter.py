"""
Output formatting for match collections.

Key Functions:
    format_result: Format a collection in any supported OutputFormat
    to_json_bytes: JSON serialization using orjson
    format_text: Plain text with optional [[ ]] highlight markers
    render_highlight_console: Rich console output with highlighted spans, used
        by FileReader.print_highlighted

Positions in JSON output are the raw 0-based values stored on each group. Text
and console output show 1-based line numbers.
"""

from __future__ import annotations

from dataclasses import asdict

import orjson
from rich.console import Console
from rich.text import Text

from .types import Document, LocatedMatch, MatchCollection, OutputFormat
from .utils import highlight_spans, line_spans


def to_json_bytes(collection: MatchCollection, document: Document | None = None) -> bytes:
    payload = {
        "file": str(document.path) if document is not None and document.path else None,
        "matches": [
            {
                "groups": [
                    {
                        "index": g.index,
                        "name": g.name,
                        "text": g.text,
                        "start_line": g.start_line,
                        "end_line": g.end_line,
                        "start_index": g.start_index,
                        "end_index": g.end_index,
                    }
                    for g in m.groups
                ]
            }
            for m in collection.items
        ],
        "stats": asdict(collection.stats),
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def _header(m: LocatedMatch, label: str) -> str:
    if m.start_line < 0:
        return f"{label}:{m.start_index}-{m.end_index}"
    return f"{label}:{m.start_line + 1}:{m.start_index}-{m.end_line + 1}:{m.end_index}"


def format_text(
    collection: MatchCollection, document: Document | None = None, highlight: bool = False
) -> str:
    label = (document.file_name if document is not None else None) or "<text>"
    out: list[str] = []
    for m in collection.items:
        out.append(_header(m, label))
        spans = line_spans(document, m.groups[0]) if document is not None else []
        if not spans:
            out.append(f"       | {m.text}")
        for li, span in spans:
            content = document.lines[li] if document is not None else ""
            if highlight:
                content = highlight_spans(content, [span], marker_left="[[", marker_right="]]")
            out.append(f"{li + 1:6d} | {content}")
        out.append("")
    s = collection.stats
    out.append(
        f"# lines_scanned={s.lines_scanned} matches={s.matches} "
        f"multiline={s.multiline} elapsed_ms={s.elapsed_ms:.2f}"
    )
    return "\n".join(out)


def render_highlight_console(
    collection: MatchCollection, document: Document, console: Console | None = None
) -> None:
    console = console or Console()
    label = document.file_name or "<text>"
    for m in collection.items:
        console.print(f"[bold]{_header(m, label)}[/bold]")
        for li, (a, b) in line_spans(document, m.groups[0]):
            line = Text(document.lines[li])
            line.stylize("bold red", a, b)
            console.print(Text(f"{li + 1:6d} | ", style="dim") + line)
        console.print()
    s = collection.stats
    console.print(
        f"[dim]lines_scanned={s.lines_scanned} matches={s.matches} "
        f"multiline={s.multiline} elapsed_ms={s.elapsed_ms:.2f}[/dim]"
    )


def format_result(
    collection: MatchCollection, fmt: OutputFormat, document: Document | None = None
) -> str:
    if fmt == OutputFormat.JSON:
        return to_json_bytes(collection, document).decode("utf-8")
    if fmt == OutputFormat.HIGHLIGHT:
        # For non-interactive environments, fall back to text with simple markers
        return format_text(collection, document, highlight=True)
    return format_text(collection, document, highlight=False)
