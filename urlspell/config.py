"""
Server configuration directives for urlspell.

Configuration files use the origin server's directive syntax: one directive
per line, arguments separated by whitespace, ``#`` starting a comment line.
Directive names are case-insensitive.

Supported directives:
    CheckSpelling On|Off   Enable the spelling fixup (default Off)
    ServerName <host>      Host name used in redirect URLs
    Port <number>          Port used in redirect URLs
    DocumentRoot <path>    Directory the URI space maps onto

Example:
    >>> from urlspell.config import load_server_config
    >>> config = load_server_config(Path("/etc/urlspell.conf"))
    >>> config.check_spelling
    True
"""

import dataclasses
import shlex
from pathlib import Path
from typing import Callable, Dict, List, Optional

from urlspell.models import ServerConfig


class ConfigError(ValueError):
    """Raised for a malformed or unknown configuration directive."""

    def __init__(self, message: str, path: Optional[Path] = None, line_number: Optional[int] = None) -> None:
        self.path = path
        self.line_number = line_number
        if path is not None and line_number is not None:
            message = f"Syntax error on line {line_number} of {path}: {message}"
        super().__init__(message)


def _parse_flag(name: str, args: List[str]) -> bool:
    """Parse an On/Off directive argument."""
    value = args[0].lower()
    if value == "on":
        return True
    if value == "off":
        return False
    raise ConfigError(f"{name} must be On or Off")


def _check_spelling(config: ServerConfig, args: List[str]) -> ServerConfig:
    return dataclasses.replace(config, check_spelling=_parse_flag("CheckSpelling", args))


def _server_name(config: ServerConfig, args: List[str]) -> ServerConfig:
    return dataclasses.replace(config, server_name=args[0])


def _port(config: ServerConfig, args: List[str]) -> ServerConfig:
    try:
        port = int(args[0])
    except ValueError:
        raise ConfigError(f"Port must be a number, got {args[0]!r}")
    if not 0 < port <= 65535:
        raise ConfigError(f"Port must be between 1 and 65535, got {port}")
    return dataclasses.replace(config, port=port)


def _document_root(config: ServerConfig, args: List[str]) -> ServerConfig:
    root = Path(args[0])
    if not root.is_dir():
        raise ConfigError(f"DocumentRoot must be a directory: {root}")
    return dataclasses.replace(config, document_root=root)


# Directive name (lower case) -> handler
_DIRECTIVES: Dict[str, Callable[[ServerConfig, List[str]], ServerConfig]] = {
    "checkspelling": _check_spelling,
    "servername": _server_name,
    "port": _port,
    "documentroot": _document_root,
}

_USAGE = {
    "checkspelling": "CheckSpelling takes one argument, whether or not to fix "
                     "miscapitalized/misspelled requests",
    "servername": "ServerName takes one argument, the host name of the server",
    "port": "Port takes one argument, the port number of the server",
    "documentroot": "DocumentRoot takes one argument, the root directory of documents",
}


def parse_directive(line: str, config: ServerConfig) -> ServerConfig:
    """Apply one configuration line to a configuration.

    Args:
        line: A single line of a configuration file.
        config: The configuration built so far.

    Returns:
        A new ServerConfig with the directive applied, or ``config`` itself
        for blank and comment lines.

    Raises:
        ConfigError: If the directive is unknown or its arguments are invalid.

    Example:
        >>> parse_directive("CheckSpelling on", ServerConfig()).check_spelling
        True
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return config

    try:
        words = shlex.split(stripped)
    except ValueError as e:
        raise ConfigError(str(e))

    name, args = words[0], words[1:]
    key = name.lower()

    handler = _DIRECTIVES.get(key)
    if handler is None:
        raise ConfigError(f"Invalid command '{name}'")

    if len(args) != 1:
        raise ConfigError(_USAGE[key])

    return handler(config, args)


def load_server_config(path: Path, base: Optional[ServerConfig] = None) -> ServerConfig:
    """Read a configuration file.

    Args:
        path: Path of the configuration file.
        base: Configuration to start from. Defaults to ServerConfig().

    Returns:
        The configuration with every directive in the file applied.

    Raises:
        ConfigError: On the first invalid line, with its line number.
        OSError: If the file cannot be read.
    """
    config = base if base is not None else ServerConfig()

    with open(path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            try:
                config = parse_directive(line, config)
            except ConfigError as e:
                raise ConfigError(str(e), path=path, line_number=line_number) from e

    return config
