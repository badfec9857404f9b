from __future__ import annotations

from typing import List, Sequence

from .core.types import Event

HEADERS = ("Year", "Category", "Name", "Start", "End")


def _cells(ev: Event) -> List[str]:
    return [str(ev.year), ev.category.label, ev.name, ev.start_date.isoformat(), ev.end_date.isoformat()]


def render_table(events: Sequence[Event]) -> str:
    rows = [_cells(ev) for ev in events]
    colw = [len(h) for h in HEADERS]
    for row in rows:
        colw = [max(w, len(c)) for w, c in zip(colw, row)]

    header = "  ".join(h.ljust(w) for h, w in zip(HEADERS, colw)).rstrip()
    lines = [header, "-" * len(header)]
    for row in rows:
        lines.append("  ".join(c.ljust(w) for c, w in zip(row, colw)).rstrip())
    lines.append(f"({len(rows)} events)")
    return "\n".join(lines)


def print_table(events: Sequence[Event]) -> None:
    print(render_table(events))
