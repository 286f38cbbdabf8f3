"""Part lookup inside an open container.

Lookups are first-match over the container's enumeration order:
- content types compare exactly (case-sensitive)
- URIs compare exactly
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from appxmanifest.core.errors import PartNotFoundError
from appxmanifest.core.model import Part

from .io import Container, list_parts

logger = logging.getLogger(__name__)


def find_by_content_type(container: Container, content_type: str) -> Part:
    for part in list_parts(container):
        if part.content_type == content_type:
            logger.debug("resolved %s -> %s in %s", content_type, part.uri, container.name)
            return part
    raise PartNotFoundError(content_type=content_type)


def find_by_uri(container: Container, uri: str) -> Part:
    for part in list_parts(container):
        if part.uri == uri:
            return part
    raise PartNotFoundError(uri=uri)


def open_part_stream(part: Part) -> BinaryIO:
    """Open a fresh read stream over the part's bytes.

    The caller must close the stream no later than the owning container.
    """
    if part.container is None:
        raise ValueError(f"part {part.uri} is not attached to a container")
    return part.container.open_member(part.zip_name)


def read_part_bytes(part: Part) -> bytes:
    with open_part_stream(part) as stream:
        return stream.read()
