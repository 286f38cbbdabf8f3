"""`appxmanifest extract` command.

Prints (or writes with `--out`) the application manifest of a package or of a
bundle's main package. The container kind is detected from the file unless
`--bundle`/`--package` forces it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from appxmanifest.core.errors import AppxManifestError
from appxmanifest.manifest.extract import (
    extract_from_bundle,
    extract_from_package,
    extract_manifest,
    manifest_to_string,
)


def register(app: typer.Typer) -> None:
    @app.command("extract")
    def extract(
        path: str = typer.Argument(..., help="Path to a .appx/.msix package or .appxbundle/.msixbundle bundle."),
        bundle: Optional[bool] = typer.Option(
            None,
            "--bundle/--package",
            help="Treat PATH as a bundle or as a single package (default: detect).",
        ),
        out: Optional[str] = typer.Option(None, "--out", help="Write the manifest XML to this file."),
    ) -> None:
        """Extract the application manifest XML."""
        try:
            if bundle is None:
                doc = extract_manifest(path)
            elif bundle:
                doc = extract_from_bundle(path)
            else:
                doc = extract_from_package(path)
        except AppxManifestError as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=1) from e

        text = manifest_to_string(doc)
        if out is None:
            typer.echo(text)
            return

        out_path = Path(out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
        typer.echo(str(out_path))
