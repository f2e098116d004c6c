"""
urlspell - CLI Interface.

A command-line interface for the URL spelling-correction fixup. It can run
the fixup against a document root for a single URI, show the candidates the
directory scanner finds for a name, or serve a document root over HTTP with
the fixup installed.

Usage Examples:
    # What would happen for a misspelled request?
    python -m urlspell check /doc/indx.html --root /srv/www

    # Include a referring page in the log line and variant list
    python -m urlspell check /doc/Foo --root /srv/www --referer http://example.com/

    # Show graded candidates for a name in a directory
    python -m urlspell scan /srv/www/doc indx.html

    # Serve a document root with spelling correction
    python -m urlspell serve --root /srv/www --port 8080
"""

import dataclasses
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from urlspell import __version__
from urlspell.config import ConfigError, load_server_config
from urlspell.host import (
    SpellingMiddleware,
    StaticFileApp,
    normalize_uri_path,
    translate_request_path,
)
from urlspell.models import FixupStatus, RequestContext, ServerConfig
from urlspell.orchestration import SpellingFixup
from urlspell.scanning import DirectoryScanner
from urlspell.ui import ReportTUI

# Initialize Typer app
app = typer.Typer(
    name="urlspell",
    help="Correct misspelled request URLs by redirect or a list of choices.",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for consistent output formatting
console = Console()


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"urlspell v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send the urlspell log channel to the console through Rich."""
    logger = logging.getLogger("urlspell")
    logger.handlers.clear()
    handler = RichHandler(console=console, show_path=False, markup=False)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def validate_directory(directory: Path, description: str = "Document root") -> None:
    """
    Validate that a directory given on the command line exists.

    Args:
        directory: Path to validate.
        description: How the directory is named in error messages.

    Raises:
        typer.Exit: If validation fails with descriptive error message.
    """
    if not directory.exists():
        console.print(
            f"[red]Error:[/red] {description} does not exist: {directory}"
        )
        raise typer.Exit(1)

    if not directory.is_dir():
        console.print(
            f"[red]Error:[/red] {description} is not a directory: {directory}"
        )
        raise typer.Exit(1)


def build_config(
    document_root: Optional[Path],
    config_file: Optional[Path],
    check_spelling: bool,
    server_name: Optional[str] = None,
    port: Optional[int] = None,
) -> ServerConfig:
    """
    Build the server configuration from a config file and command-line options.

    Command-line options override directives read from the file.

    Raises:
        typer.Exit: If the configuration file is invalid or unreadable.
    """
    config = ServerConfig(check_spelling=check_spelling)

    if config_file is not None:
        try:
            config = load_server_config(config_file, base=config)
        except ConfigError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)
        except OSError as e:
            console.print(f"[red]Error:[/red] Cannot read config file: {e}")
            raise typer.Exit(1)

    overrides = {}
    if document_root is not None:
        overrides["document_root"] = document_root
    if server_name is not None:
        overrides["server_name"] = server_name
    if port is not None:
        overrides["port"] = port

    try:
        config = dataclasses.replace(config, **overrides)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if config.document_root is None:
        console.print("[red]Error:[/red] No document root given (use --root or DocumentRoot).")
        raise typer.Exit(1)

    validate_directory(config.document_root)
    return config


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Correct misspelled request URLs by redirect or a list of choices."""
    pass


@app.command()
def check(
    uri: str = typer.Argument(..., help="Request path, e.g. /doc/indx.html."),
    document_root: Optional[Path] = typer.Option(
        None,
        "--root",
        "-r",
        help="Document root the request path maps onto.",
    ),
    referer: Optional[str] = typer.Option(
        None,
        "--referer",
        help="Referer header to send with the request.",
    ),
    method: str = typer.Option(
        "GET",
        "--method",
        "-m",
        help="HTTP method of the request.",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-f",
        help="Server configuration file (CheckSpelling, ServerName, Port, DocumentRoot).",
    ),
    show_html: bool = typer.Option(
        False,
        "--html",
        help="Print the variant list HTML of a 300 response.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose output.",
    ),
) -> None:
    """
    Run the spelling fixup for a single request.

    Spelling correction is enabled unless the configuration file turns it
    off with "CheckSpelling Off".
    """
    configure_logging(verbose)
    config = build_config(document_root, config_file, check_spelling=True)

    normalized = normalize_uri_path(uri)
    translated = translate_request_path(config.document_root, normalized)
    headers = {"Referer": referer} if referer is not None else {}
    request = RequestContext(
        uri=normalized,
        filename=translated.filename,
        path_info=translated.path_info,
        method=method.upper(),
        file_exists=translated.exists,
        headers_in=headers,
    )

    try:
        result = SpellingFixup(config).check_spelling(request)
    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    tui = ReportTUI(console)
    tui.display_fixup_result(request, result)

    if show_html and result.status is FixupStatus.MULTIPLE_CHOICES:
        console.print(result.variant_list, markup=False, highlight=False, soft_wrap=True)


@app.command()
def scan(
    directory: Path = typer.Argument(
        ...,
        help="Directory to look for candidates in.",
        exists=False,  # We do our own validation
    ),
    name: str = typer.Argument(..., help="The (misspelled) name to look for."),
    no_basename: bool = typer.Option(
        False,
        "--no-basename",
        help="Do not collect entries that share only the part before the first '.'.",
    ),
) -> None:
    """
    Show the candidates the directory scanner finds for a name.

    Candidates are listed in directory order, as they are collected.
    """
    validate_directory(directory, "Scan directory")

    scanner = DirectoryScanner(basename_matching=not no_basename)
    result = scanner.scan(str(directory), name)

    tui = ReportTUI(console)
    tui.display_scan_result(str(directory), name, result)


@app.command()
def serve(
    document_root: Optional[Path] = typer.Option(
        None,
        "--root",
        "-r",
        help="Document root to serve.",
    ),
    host: str = typer.Option(
        "127.0.0.1",
        "--host",
        help="Interface to listen on.",
    ),
    port: int = typer.Option(
        8080,
        "--port",
        "-p",
        help="Port to listen on.",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-f",
        help="Server configuration file (CheckSpelling, ServerName, Port, DocumentRoot).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose output.",
    ),
) -> None:
    """
    Serve a document root over HTTP with spelling correction.

    Redirect URLs name the ServerName from the configuration file (default
    "localhost") and the port being listened on.

    Spelling correction is enabled unless the configuration file turns it
    off with "CheckSpelling Off".
    """
    from wsgiref.simple_server import make_server

    configure_logging(verbose)
    config = build_config(
        document_root, config_file, check_spelling=True, port=port
    )

    application = SpellingMiddleware(StaticFileApp(config.document_root), config)

    try:
        with make_server(host, port, application) as httpd:
            console.print(
                f"Serving [bold]{config.document_root}[/bold] on http://{host}:{port}/ "
                f"(CheckSpelling {'On' if config.check_spelling else 'Off'})"
            )
            httpd.serve_forever()

    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped by user.[/yellow]")
        raise typer.Exit(130)

    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
