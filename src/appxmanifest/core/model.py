"""Core data model for appxmanifest.

- Content-type constants used to locate manifest parts.
- `Part`: a named, typed entry of an open container.
- `BundlePackageEntry`: one `<Package>` record of a bundle manifest.

This module must not import container/manifest/cli.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import unquote

APP_MANIFEST_CONTENT_TYPE = "application/vnd.ms-appx.manifest+xml"
BUNDLE_MANIFEST_CONTENT_TYPE = "application/vnd.ms-appx.bundlemanifest+xml"

# Bundle manifest `Package/@Type` value of the main package (exact match).
MAIN_PACKAGE_TYPE = "Application"

# OPC content-types stream; stored in the ZIP but not a part.
CONTENT_TYPES_PART_NAME = "[Content_Types].xml"

# Media types registered for the container file extensions (see container.io).
PACKAGE_MEDIA_TYPE = "application/vnd.ms-appx"
BUNDLE_MEDIA_TYPE = "application/vnd.ms-appx.bundle"
PACKAGE_EXTENSIONS = (".appx", ".msix")
BUNDLE_EXTENSIONS = (".appxbundle", ".msixbundle")


def part_uri_from_zip_name(zip_name: str) -> str:
    """Map a ZIP entry name to its part URI: leading '/' and percent-decoded."""
    return "/" + unquote(zip_name.lstrip("/"))


@dataclass(frozen=True)
class Part:
    uri: str
    content_type: str
    size: int
    zip_name: str
    # Owning container; kept Any so core stays free of container imports.
    container: Any = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class BundlePackageEntry:
    # Optional: only the selected main package must name its file.
    file_name: Optional[str]
    type: str
    architecture: Optional[str] = None
    resource_id: Optional[str] = None
    version: Optional[str] = None

    @property
    def part_uri(self) -> str:
        """URI of the inner package part inside the bundle container."""
        if self.file_name is None:
            raise ValueError(f"bundle package of type {self.type!r} has no FileName")
        return "/" + self.file_name
