"""appxmanifest: read the application manifest out of `.appx`/`.appxbundle` containers.

Packages and bundles are OPC (ZIP) containers. The manifest is located by the
content type declared for it in `[Content_Types].xml`; for bundles the main
("Application") inner package is opened straight from the outer container's
part stream, without extracting anything to disk.
"""

from __future__ import annotations

from appxmanifest.core import (
    APP_MANIFEST_CONTENT_TYPE,
    BUNDLE_MANIFEST_CONTENT_TYPE,
    AppxManifestError,
    ContainerFormatError,
    MainPackageNotFoundError,
    PackageNotFoundError,
    PartNotFoundError,
    XmlParseError,
)
from appxmanifest.manifest import extract_from_bundle, extract_from_package, extract_manifest

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "APP_MANIFEST_CONTENT_TYPE",
    "BUNDLE_MANIFEST_CONTENT_TYPE",
    "AppxManifestError",
    "ContainerFormatError",
    "MainPackageNotFoundError",
    "PackageNotFoundError",
    "PartNotFoundError",
    "XmlParseError",
    "extract_from_bundle",
    "extract_from_package",
    "extract_manifest",
]
