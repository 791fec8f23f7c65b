"""Parsing utilities for comma-separated edge lists."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from degrees_of_separation.graph.types import EdgeRecord, NodeId


@dataclass
class ReadStats:
    """Statistics collected while reading an edge file."""

    lines_read: int = 0
    empty_lines: int = 0
    malformed_lines: int = 0
    edges_read: int = 0


def _parse_node_id(field: str) -> NodeId | None:
    field = field.strip()
    if not field.isdigit() or not field.isascii():
        return None
    return int(field)


def parse_edge_line(raw_line: str) -> EdgeRecord | None:
    """
    Parse one "source,target" line into a pair of node IDs.

    Returns None for empty or malformed lines.
    """
    line = raw_line.rstrip("\n\r")
    if not line.strip():
        return None

    parts = line.split(",")
    if len(parts) != 2:
        return None

    source = _parse_node_id(parts[0])
    target = _parse_node_id(parts[1])
    if source is None or target is None:
        return None
    return source, target


def iter_edge_records(
    lines: Iterable[str],
    stats: ReadStats | None = None,
) -> Iterator[EdgeRecord]:
    """Yield parsed edges from raw lines, skipping invalid lines."""
    for raw_line in lines:
        parsed = parse_edge_line(raw_line)
        if stats is not None:
            stats.lines_read += 1
            if parsed is not None:
                stats.edges_read += 1
            elif raw_line.strip():
                stats.malformed_lines += 1
            else:
                stats.empty_lines += 1
        if parsed is not None:
            yield parsed


def read_edge_file(
    path: str,
    stats: ReadStats | None = None,
) -> tuple[list[NodeId], list[NodeId]]:
    """
    Read an edge file into parallel source and target lists.

    OSError from opening or reading the file propagates to the caller. Bytes
    that are not valid UTF-8 are reported as OSError as well.
    """
    sources: list[NodeId] = []
    targets: list[NodeId] = []

    with open(path, encoding="utf-8") as handle:
        try:
            for source, target in iter_edge_records(handle, stats):
                sources.append(source)
                targets.append(target)
        except UnicodeDecodeError as exc:
            raise OSError(f"cannot decode {path} as UTF-8: {exc}") from exc

    return sources, targets
