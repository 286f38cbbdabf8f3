"""Manifest extraction from packages and bundles.

Single package:
  open container -> part with the app-manifest content type -> parse XML.

Bundle:
  open outer container -> bundle-manifest part -> first `Application` package
  -> outer part `/<FileName>` -> open that part's stream as the inner
  container -> single-package steps on the inner container.

The inner package is never copied out of the bundle. Resources are released
inner-first: inner container, then the part stream it reads from, then the
outer container, on success and on every failure.
"""

from __future__ import annotations

import logging
import mimetypes
import os
from contextlib import ExitStack
from typing import Union
from xml.etree import ElementTree

from appxmanifest.container.io import Container, Source, ensure_initialized, open_container
from appxmanifest.container.parts import find_by_content_type, find_by_uri, open_part_stream, read_part_bytes
from appxmanifest.core.errors import PartNotFoundError
from appxmanifest.core.model import (
    APP_MANIFEST_CONTENT_TYPE,
    BUNDLE_MANIFEST_CONTENT_TYPE,
    BUNDLE_MEDIA_TYPE,
    PACKAGE_MEDIA_TYPE,
)
from appxmanifest.core.xmlparse import parse_xml, serialize_xml

from .bundle import find_main_package, read_bundle_packages

logger = logging.getLogger(__name__)

PACKAGE_KIND = "package"
BUNDLE_KIND = "bundle"


def read_manifest_from_container(container: Container) -> ElementTree.ElementTree:
    """Resolve and parse the application manifest of an open container."""
    part = find_by_content_type(container, APP_MANIFEST_CONTENT_TYPE)
    with open_part_stream(part) as stream:
        data = stream.read()
    return parse_xml(data, where=part.uri)


def extract_from_package(source: Source) -> ElementTree.ElementTree:
    """Return the parsed application manifest of a single package."""
    with open_container(source) as container:
        return read_manifest_from_container(container)


def extract_from_bundle(source: Source) -> ElementTree.ElementTree:
    """Return the parsed application manifest of a bundle's main package."""
    with ExitStack() as stack:
        outer = stack.enter_context(open_container(source))

        bundle_part = find_by_content_type(outer, BUNDLE_MANIFEST_CONTENT_TYPE)
        bundle_doc = parse_xml(read_part_bytes(bundle_part), where=bundle_part.uri)
        main = find_main_package(read_bundle_packages(bundle_doc))
        logger.debug("main package of %s: %s", outer.name, main.file_name)

        main_part = find_by_uri(outer, main.part_uri)
        stream = stack.enter_context(open_part_stream(main_part))
        inner = stack.enter_context(open_container(stream))
        return read_manifest_from_container(inner)


def detect_package_kind(path: Union[str, "os.PathLike[str]"]) -> str:
    """Return PACKAGE_KIND or BUNDLE_KIND for a container file.

    The registered file extensions decide first; for any other extension the
    container is opened and checked for a bundle-manifest part.
    """
    ensure_initialized()
    media_type, _ = mimetypes.guess_type(os.fspath(path), strict=False)
    if media_type == BUNDLE_MEDIA_TYPE:
        return BUNDLE_KIND
    if media_type == PACKAGE_MEDIA_TYPE:
        return PACKAGE_KIND

    with open_container(path) as container:
        try:
            find_by_content_type(container, BUNDLE_MANIFEST_CONTENT_TYPE)
        except PartNotFoundError:
            return PACKAGE_KIND
        return BUNDLE_KIND


def extract_manifest(path: Union[str, "os.PathLike[str]"]) -> ElementTree.ElementTree:
    """Extract the application manifest from a package or a bundle file."""
    if detect_package_kind(path) == BUNDLE_KIND:
        return extract_from_bundle(path)
    return extract_from_package(path)


def manifest_to_string(doc: ElementTree.ElementTree) -> str:
    """Serialize a manifest document as UTF-8 XML text with a declaration.

    Documents from `extract_*` keep their source prefixes, so the usual
    `<Package xmlns="..." xmlns:uap="...">` shape survives.
    """
    return serialize_xml(doc)
