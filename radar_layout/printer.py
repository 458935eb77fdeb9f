from typing import Iterable, List

from .model import LegendLayout, LegendRow, PlacedEntry, RenderResult


def format_entry(entry: PlacedEntry) -> str:
    text = f"{entry.id:>3}. {entry.label} [q={entry.quadrant} r={entry.ring}] ({entry.x:.2f}, {entry.y:.2f}) {entry.color} {entry.marker}"
    if entry.link:
        text += f" -> {entry.link}"
    return text


def format_row(row: LegendRow) -> str:
    prefix = "    " if row.is_description else "  "
    return f"{prefix}{row.text}  @({row.offset.x:g}, {row.offset.y:g})"


def print_legend(legend: LegendLayout) -> str:
    lines: List[str] = []
    for quadrant, (title, offset) in enumerate(legend.titles):
        lines.append(f"{title}  @({offset.x:g}, {offset.y:g})")
        for bucket in legend.buckets:
            if bucket.quadrant != quadrant:
                continue
            lines.append(f" {bucket.header}  @({bucket.header_offset.x:g}, {bucket.header_offset.y:g})")
            lines.extend(format_row(row) for row in bucket.rows)
    return "\n".join(lines)


def print_entries(entries: Iterable[PlacedEntry]) -> str:
    return "\n".join(format_entry(entry) for entry in entries)


def print_result(result: RenderResult) -> str:
    parts = []
    if result.title:
        parts.append(result.title)
    parts.append(f"Entries ({len(result.entries)}), {result.ticks} ticks, {result.overlaps} overlaps:")
    if result.entries:
        parts.append(print_entries(result.entries))
    parts.append("Legend:")
    parts.append(print_legend(result.legend))
    return "\n".join(parts)
