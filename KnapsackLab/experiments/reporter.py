"""
Markdown and JSON output for benchmark results.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

EMPTY_TABLE = "No data available."


def format_markdown_table(rows: Sequence[Sequence[str]], headers: Sequence[str]) -> str:
    """Left-aligned markdown table with columns padded to their widest cell."""
    if not rows:
        return EMPTY_TABLE

    widths = [len(h) for h in headers]
    for row in rows:
        for i, col in enumerate(row):
            widths[i] = max(widths[i], len(col))

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{cell:<{widths[i]}}" for i, cell in enumerate(cells)) + " |\n"

    output = _line(headers)
    output += "|" + "|".join("-" * (w + 2) for w in widths) + "|\n"
    for row in rows:
        output += _line(row)
    return output


class Reporter:
    """Writes report text to a file, or to stdout when no path is given."""

    def __init__(self, path: Union[str, Path, None] = None, append: bool = True):
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not append:
                self.path.write_text("", encoding="utf-8")

    def report(self, text: str) -> None:
        if self.path is None:
            sys.stdout.write(text)
            sys.stdout.flush()
            return
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(text)


def write_json(path: Union[str, Path], groups: Iterable[Dict[str, Any]]) -> Path:
    """
    Dump experiment groups (``{"config": ..., "measurements": [...]}``) as JSON.
    Measurement objects are converted with their ``to_dict``.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload: List[Dict[str, Any]] = []
    for group in groups:
        entry = dict(group)
        entry["measurements"] = [_as_dict(m) for m in group.get("measurements", [])]
        payload.append(entry)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def _as_dict(obj: Any) -> Any:
    to_dict: Optional[Any] = getattr(obj, "to_dict", None)
    return to_dict() if callable(to_dict) else obj
