"""Package container access (OPC/ZIP) and part lookup."""

from __future__ import annotations

from .io import Container, close_container, ensure_initialized, list_parts, open_container
from .parts import find_by_content_type, find_by_uri, open_part_stream, read_part_bytes

__all__ = [
    "Container",
    "open_container",
    "close_container",
    "ensure_initialized",
    "list_parts",
    "find_by_content_type",
    "find_by_uri",
    "open_part_stream",
    "read_part_bytes",
]
