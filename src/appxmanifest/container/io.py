"""Container access for OPC package files (`.appx`, `.appxbundle`, ...).

A container is a ZIP archive plus a `[Content_Types].xml` stream that assigns
a content type to every part:

- `<Override PartName="/AppxManifest.xml" ContentType="..."/>` wins for a part name
- `<Default Extension="xml" ContentType="..."/>` applies by file extension

Both comparisons are ASCII case-insensitive as OPC requires. Parts are kept in
ZIP central-directory order.

A container can be opened from a file path or from a readable, seekable binary
stream. The stream form is what lets a bundle's inner package be opened
straight from the outer container's part stream without touching disk.
"""

from __future__ import annotations

import logging
import mimetypes
import os
import zipfile
from pathlib import Path
from typing import BinaryIO, Optional, Union

from appxmanifest.core.errors import ContainerFormatError, PackageNotFoundError, XmlParseError
from appxmanifest.core.model import (
    BUNDLE_EXTENSIONS,
    BUNDLE_MEDIA_TYPE,
    CONTENT_TYPES_PART_NAME,
    PACKAGE_EXTENSIONS,
    PACKAGE_MEDIA_TYPE,
    Part,
    part_uri_from_zip_name,
)
from appxmanifest.core.xmlparse import get_local_attr, local_name, parse_xml

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", BinaryIO]

_initialized = False


def ensure_initialized() -> None:
    """Register the package/bundle file extensions with `mimetypes` once.

    Called by the first `open_container()`; later calls are no-ops.
    """
    global _initialized
    if _initialized:
        return
    for ext in PACKAGE_EXTENSIONS:
        mimetypes.add_type(PACKAGE_MEDIA_TYPE, ext)
    for ext in BUNDLE_EXTENSIONS:
        mimetypes.add_type(BUNDLE_MEDIA_TYPE, ext)
    _initialized = True
    logger.debug("registered package media types for %s", PACKAGE_EXTENSIONS + BUNDLE_EXTENSIONS)


class Container:
    """Read-only handle over an opened package container.

    Use as a context manager, or call `close()` exactly once when done.
    """

    def __init__(self, zf: zipfile.ZipFile, *, name: str, owned_file: Optional[BinaryIO] = None):
        self._zf = zf
        self._owned_file = owned_file
        self.name = name
        self._parts: list[Part] = []

    @property
    def closed(self) -> bool:
        return self._zf is None

    @property
    def parts(self) -> list[Part]:
        return list(self._parts)

    def open_member(self, zip_name: str) -> BinaryIO:
        if self._zf is None:
            raise ValueError(f"container {self.name} is closed")
        return self._zf.open(zip_name, "r")

    def close(self) -> None:
        if self._zf is None:
            return
        zf, self._zf = self._zf, None
        try:
            zf.close()
        finally:
            # ZipFile never closes a file object it was handed.
            if self._owned_file is not None:
                self._owned_file.close()
                self._owned_file = None
        logger.debug("closed container %s", self.name)

    def __enter__(self) -> "Container":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"{len(self._parts)} parts"
        return f"<Container {self.name!r} ({state})>"


def _find_content_types_name(zf: zipfile.ZipFile) -> str:
    wanted = CONTENT_TYPES_PART_NAME.lower()
    for info in zf.infolist():
        if info.filename.lower() == wanted:
            return info.filename
    raise ContainerFormatError(f"missing {CONTENT_TYPES_PART_NAME}")


def _read_content_types(zf: zipfile.ZipFile, member: str) -> tuple[dict[str, str], dict[str, str]]:
    """Return ({extension: content_type}, {part_name: content_type}), keys lowercased."""
    try:
        doc = parse_xml(zf.read(member), where=CONTENT_TYPES_PART_NAME)
    except XmlParseError as e:
        raise ContainerFormatError(str(e)) from e

    defaults: dict[str, str] = {}
    overrides: dict[str, str] = {}
    for elem in doc.getroot():
        if not isinstance(elem.tag, str):
            continue
        kind = local_name(elem.tag)
        content_type = get_local_attr(elem, "ContentType")
        if kind == "Default":
            ext = get_local_attr(elem, "Extension")
            if ext is None or content_type is None:
                raise ContainerFormatError(f"{CONTENT_TYPES_PART_NAME}: Default requires Extension and ContentType")
            defaults.setdefault(ext.lower(), content_type)
        elif kind == "Override":
            name = get_local_attr(elem, "PartName")
            if name is None or content_type is None:
                raise ContainerFormatError(f"{CONTENT_TYPES_PART_NAME}: Override requires PartName and ContentType")
            overrides.setdefault(name.lower(), content_type)
    return defaults, overrides


def _content_type_for(zip_name: str, defaults: dict[str, str], overrides: dict[str, str]) -> str:
    override = overrides.get("/" + zip_name.lower())
    if override is not None:
        return override
    last_segment = zip_name.rsplit("/", 1)[-1]
    if "." in last_segment:
        return defaults.get(last_segment.rsplit(".", 1)[1].lower(), "")
    return ""


def _load_parts(container: Container, zf: zipfile.ZipFile) -> list[Part]:
    ct_name = _find_content_types_name(zf)
    defaults, overrides = _read_content_types(zf, ct_name)

    parts: list[Part] = []
    for info in zf.infolist():
        if info.is_dir() or info.filename == ct_name:
            continue
        parts.append(
            Part(
                uri=part_uri_from_zip_name(info.filename),
                content_type=_content_type_for(info.filename, defaults, overrides),
                size=int(info.file_size),
                zip_name=info.filename,
                container=container,
            )
        )
    return parts


def open_container(source: Source) -> Container:
    """Open a package container from a file path or a binary stream.

    Raises:
        PackageNotFoundError: `source` is a path that is not an existing file.
        ContainerFormatError: the bytes are not a ZIP archive with content types.
        TypeError: `source` is neither a path nor a seekable binary stream.
    """
    ensure_initialized()

    owned_file: Optional[BinaryIO] = None
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        if not path.is_file():
            raise PackageNotFoundError(path)
        owned_file = path.open("rb")
        fp: BinaryIO = owned_file
        name = str(path)
    elif hasattr(source, "read") and hasattr(source, "seek"):
        seekable = getattr(source, "seekable", None)
        if seekable is None or not seekable():
            raise TypeError("open_container: stream source must be seekable")
        fp = source
        name = str(getattr(source, "name", "<stream>"))
    else:
        raise TypeError(f"open_container: expected path or binary stream, got {type(source).__name__}")

    try:
        try:
            zf = zipfile.ZipFile(fp, "r")
        except zipfile.BadZipFile as e:
            raise ContainerFormatError(f"{name}: not a package container ({e})") from e
        container = Container(zf, name=name, owned_file=owned_file)
    except BaseException:
        if owned_file is not None:
            owned_file.close()
        raise

    try:
        container._parts = _load_parts(container, zf)
    except BaseException:
        container.close()
        raise

    logger.debug("opened container %s with %d parts", name, len(container._parts))
    return container


def close_container(container: Container) -> None:
    container.close()


def list_parts(container: Container) -> list[Part]:
    """Return the container's parts in enumeration order."""
    if container.closed:
        raise ValueError(f"container {container.name} is closed")
    return container.parts
