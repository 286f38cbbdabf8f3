"""appxmanifest CLI entrypoint.

Typer application; each subcommand module exposes `register(app)`.
"""

from __future__ import annotations

import logging

import typer

app = typer.Typer(
    name="appxmanifest",
    add_completion=False,
    no_args_is_help=True,
    help="Read the application manifest from .appx/.msix packages and bundles.",
)


@app.callback()
def _callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        envvar="APPXMANIFEST_VERBOSE",
        help="Log container and part resolution details to stderr.",
    ),
) -> None:
    """appxmanifest CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s: %(message)s",
    )


@app.command("version")
def version() -> None:
    """Print the installed appxmanifest version."""
    from appxmanifest import __version__

    typer.echo(__version__)


def _register_commands() -> None:
    """Register CLI subcommands.

    Importing these modules must remain lightweight so `appxmanifest --help` is fast.
    """
    from appxmanifest.cli.commands import extract as extract_cmd
    from appxmanifest.cli.commands import parts as parts_cmd

    extract_cmd.register(app)
    parts_cmd.register(app)


_register_commands()
