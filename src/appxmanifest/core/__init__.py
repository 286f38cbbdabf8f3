"""appxmanifest core: constants, data model and error kinds.

This package is intentionally standalone and must not import container/manifest/cli
to avoid circular dependencies.
"""

from __future__ import annotations

from .errors import (
    AppxManifestError,
    ContainerFormatError,
    MainPackageNotFoundError,
    PackageNotFoundError,
    PartNotFoundError,
    XmlParseError,
)
from .model import (
    APP_MANIFEST_CONTENT_TYPE,
    BUNDLE_EXTENSIONS,
    BUNDLE_MANIFEST_CONTENT_TYPE,
    BUNDLE_MEDIA_TYPE,
    CONTENT_TYPES_PART_NAME,
    MAIN_PACKAGE_TYPE,
    PACKAGE_EXTENSIONS,
    PACKAGE_MEDIA_TYPE,
    BundlePackageEntry,
    Part,
    part_uri_from_zip_name,
)

__all__ = [
    "APP_MANIFEST_CONTENT_TYPE",
    "BUNDLE_EXTENSIONS",
    "BUNDLE_MANIFEST_CONTENT_TYPE",
    "BUNDLE_MEDIA_TYPE",
    "CONTENT_TYPES_PART_NAME",
    "MAIN_PACKAGE_TYPE",
    "PACKAGE_EXTENSIONS",
    "PACKAGE_MEDIA_TYPE",
    "BundlePackageEntry",
    "Part",
    "part_uri_from_zip_name",
    "AppxManifestError",
    "ContainerFormatError",
    "MainPackageNotFoundError",
    "PackageNotFoundError",
    "PartNotFoundError",
    "XmlParseError",
]
