"""Bundle manifest (`AppxMetadata/AppxBundleManifest.xml`) reading.

Only the package list is consumed:

    <Bundle>
      <Packages>
        <Package Type="Application" FileName="Main_x64.appx" .../>
        <Package Type="Resource" FileName="Res_scale-200.appx" .../>
      </Packages>
    </Bundle>

Elements and attributes are matched by local name, so any bundle schema
namespace (or none) is accepted.
"""

from __future__ import annotations

from typing import Iterable
from xml.etree import ElementTree

from appxmanifest.core.errors import ContainerFormatError, MainPackageNotFoundError
from appxmanifest.core.model import MAIN_PACKAGE_TYPE, BundlePackageEntry
from appxmanifest.core.xmlparse import get_local_attr, iter_local


def read_bundle_packages(doc: ElementTree.ElementTree) -> list[BundlePackageEntry]:
    """Return every `Packages/Package` entry in document order.

    Entries are not validated here; a missing `FileName` only matters for the
    entry `find_main_package` selects.
    """
    entries: list[BundlePackageEntry] = []
    for packages in iter_local(doc.getroot(), "Packages"):
        for elem in iter_local(packages, "Package"):
            entries.append(
                BundlePackageEntry(
                    file_name=get_local_attr(elem, "FileName") or None,
                    type=get_local_attr(elem, "Type") or "",
                    architecture=get_local_attr(elem, "Architecture"),
                    resource_id=get_local_attr(elem, "ResourceId"),
                    version=get_local_attr(elem, "Version"),
                )
            )
    return entries


def find_main_package(entries: Iterable[BundlePackageEntry]) -> BundlePackageEntry:
    """Return the first entry of type 'Application'.

    Uniqueness is not checked: with several Application entries the first in
    document order wins.
    """
    for i, entry in enumerate(entries):
        if entry.type == MAIN_PACKAGE_TYPE:
            if entry.file_name is None:
                raise ContainerFormatError(f"bundle manifest: main package (Package[{i}]) has no FileName")
            return entry
    raise MainPackageNotFoundError(f"bundle manifest lists no package of type {MAIN_PACKAGE_TYPE!r}")
