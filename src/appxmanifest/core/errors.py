"""Error kinds raised while extracting manifests.

Every failure aborts the current extraction. The underlying cause (for example
`zipfile.BadZipFile` or `xml.etree.ElementTree.ParseError`) is chained via
`raise ... from e` so callers can inspect it.

Each kind also derives from the closest builtin so that callers which only
know about `FileNotFoundError`/`ValueError`/`LookupError` still catch it.
"""

from __future__ import annotations


class AppxManifestError(Exception):
    """Base class for all appxmanifest failures."""


class PackageNotFoundError(AppxManifestError, FileNotFoundError):
    """The supplied path does not reference an existing file."""

    def __init__(self, path: object):
        self.path = path
        super().__init__(f"package not found: {path}")


class ContainerFormatError(AppxManifestError, ValueError):
    """The byte source is not a valid OPC package container."""


class PartNotFoundError(AppxManifestError, LookupError):
    """No part matches the requested content type or URI."""

    def __init__(self, *, content_type: str | None = None, uri: str | None = None):
        self.content_type = content_type
        self.uri = uri
        if uri is not None:
            msg = f"no part with uri {uri!r}"
        else:
            msg = f"no part with content type {content_type!r}"
        super().__init__(msg)


class MainPackageNotFoundError(AppxManifestError, LookupError):
    """The bundle manifest lists no package of type 'Application'."""


class XmlParseError(AppxManifestError, ValueError):
    """A part's content is not well-formed XML."""

    def __init__(self, where: str, detail: str):
        self.where = where
        self.detail = detail
        super().__init__(f"{where}: malformed XML ({detail})")
