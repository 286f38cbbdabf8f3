"""Pytest configuration and shared container builders.

The `src/` directory is put on `sys.path` so `import appxmanifest` works even
when pytest runs from an interpreter without the editable install.

The builders below assemble `.appx`-style packages and `.appxbundle`-style
bundles in memory with `zipfile`, including their `[Content_Types].xml`, so
tests never need real package files.
"""

from __future__ import annotations

import io
import sys
import zipfile
from pathlib import Path
from typing import Optional, Union


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared Test Helpers: in-memory package and bundle containers
# =============================================================================

APP_MANIFEST_CT = "application/vnd.ms-appx.manifest+xml"
BUNDLE_MANIFEST_CT = "application/vnd.ms-appx.bundlemanifest+xml"
CONTENT_TYPES_NS = "http://schemas.openxmlformats.org/package/2006/content-types"
BUNDLE_NS = "http://schemas.microsoft.com/appx/2013/bundle"


def app_manifest_xml(name: str = "Contoso.App", version: str = "1.0.0.0") -> str:
    """Create a minimal application manifest document."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<Package xmlns="http://schemas.microsoft.com/appx/manifest/foundation/windows10">'
        f'<Identity Name="{name}" Publisher="CN=Contoso" Version="{version}"/>'
        "<Properties><DisplayName>Contoso</DisplayName></Properties>"
        "</Package>"
    )


def content_types_xml(
    defaults: Optional[dict[str, str]] = None,
    overrides: Optional[dict[str, str]] = None,
) -> str:
    """Create a `[Content_Types].xml` document."""
    lines = [f'<Types xmlns="{CONTENT_TYPES_NS}">']
    for ext, ct in (defaults or {}).items():
        lines.append(f'<Default Extension="{ext}" ContentType="{ct}"/>')
    for name, ct in (overrides or {}).items():
        lines.append(f'<Override PartName="{name}" ContentType="{ct}"/>')
    lines.append("</Types>")
    return "".join(lines)


def make_zip_bytes(
    members: list[tuple[str, Union[str, bytes]]],
    *,
    compression: int = zipfile.ZIP_DEFLATED,
) -> bytes:
    """Create ZIP bytes with members written in the given order."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=compression) as zf:
        for name, data in members:
            zf.writestr(name, data)
    return buf.getvalue()


def make_package_bytes(
    manifest: Optional[Union[str, bytes]] = None,
    *,
    manifest_content_type: str = APP_MANIFEST_CT,
    extra_members: Optional[list[tuple[str, Union[str, bytes]]]] = None,
    extra_overrides: Optional[dict[str, str]] = None,
) -> bytes:
    """Create a single-package container.

    The manifest is stored as `/AppxManifest.xml` with an Override entry for
    `manifest_content_type`. Pass `manifest=""` to omit the manifest part.
    """
    if manifest is None:
        manifest = app_manifest_xml()
    overrides = {"/AppxBlockMap.xml": "application/vnd.ms-appx.blockmap+xml"}
    members: list[tuple[str, Union[str, bytes]]] = []
    if manifest != "":
        overrides["/AppxManifest.xml"] = manifest_content_type
        members.append(("AppxManifest.xml", manifest))
    overrides.update(extra_overrides or {})
    members.append(("AppxBlockMap.xml", "<BlockMap/>"))
    members.append(("Assets/Logo.png", b"\x89PNG\r\n"))
    members.extend(extra_members or [])
    ct = content_types_xml(defaults={"png": "image/png"}, overrides=overrides)
    return make_zip_bytes([("[Content_Types].xml", ct)] + members)


def bundle_manifest_xml(packages: list[tuple[str, str]], *, namespace: Optional[str] = BUNDLE_NS) -> str:
    """Create a bundle manifest listing (type, file_name) packages in order."""
    xmlns = f' xmlns="{namespace}"' if namespace else ""
    items = "".join(
        f'<Package Type="{ptype}" Version="1.0.0.0" Architecture="x64" FileName="{fname}" Offset="0" Size="1"/>'
        for ptype, fname in packages
    )
    return (
        f'<?xml version="1.0" encoding="utf-8"?><Bundle{xmlns} SchemaVersion="1.0">'
        '<Identity Name="Contoso.App" Publisher="CN=Contoso" Version="1.0.0.0"/>'
        f"<Packages>{items}</Packages></Bundle>"
    )


def make_bundle_bytes(
    packages: list[tuple[str, str, bytes]],
    *,
    bundle_manifest: Optional[str] = None,
    inner_compression: int = zipfile.ZIP_STORED,
) -> bytes:
    """Create a bundle from (type, file_name, package_bytes) entries.

    Inner packages are stored uncompressed by default, as bundles store them.
    """
    if bundle_manifest is None:
        bundle_manifest = bundle_manifest_xml([(ptype, fname) for ptype, fname, _ in packages])
    ct = content_types_xml(
        defaults={"appx": "application/vnd.ms-appx"},
        overrides={"/AppxMetadata/AppxBundleManifest.xml": BUNDLE_MANIFEST_CT},
    )
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("[Content_Types].xml", ct)
        zf.writestr("AppxMetadata/AppxBundleManifest.xml", bundle_manifest)
        for _ptype, fname, data in packages:
            zf.writestr(fname, data, compress_type=inner_compression)
    return buf.getvalue()


def write_bytes(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path
