"""`appxmanifest parts` command.

Lists every part of a container as `<uri>\\t<content type>`, in container order.
"""

from __future__ import annotations

import typer

from appxmanifest.container.io import list_parts, open_container
from appxmanifest.core.errors import AppxManifestError


def register(app: typer.Typer) -> None:
    @app.command("parts")
    def parts(
        path: str = typer.Argument(..., help="Path to a package or bundle."),
    ) -> None:
        """List the parts of a package container with their content types."""
        try:
            with open_container(path) as container:
                lines = [f"{p.uri}\t{p.content_type}" for p in list_parts(container)]
        except AppxManifestError as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=1) from e

        for line in lines:
            typer.echo(line)
