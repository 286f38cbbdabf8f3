"""Manifest extraction for packages and bundles."""

from __future__ import annotations

from .bundle import find_main_package, read_bundle_packages
from .extract import (
    BUNDLE_KIND,
    PACKAGE_KIND,
    detect_package_kind,
    extract_from_bundle,
    extract_from_package,
    extract_manifest,
    manifest_to_string,
    read_manifest_from_container,
)

__all__ = [
    "BUNDLE_KIND",
    "PACKAGE_KIND",
    "detect_package_kind",
    "extract_from_bundle",
    "extract_from_package",
    "extract_manifest",
    "find_main_package",
    "manifest_to_string",
    "read_bundle_packages",
    "read_manifest_from_container",
]
