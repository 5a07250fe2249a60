"""Utility functions for loading GraphQL schema sources.

This module reads SDL text from files, directories and URLs with proper
error handling, and turns one or more sources into a parsed Schema.
"""

from pathlib import Path
from typing import Iterable
from urllib.parse import urlparse

import requests

from .core.schema import Schema, SchemaLoadError, parse_schema
from .logging_config import get_logger

logger = get_logger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")


def is_url(source: str) -> bool:
    """Check whether a source string is an http(s) URL."""
    parsed = urlparse(source)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def load_sdl_from_file(file_path: str | Path) -> str:
    """Load SDL text from a local file.

    Args:
        file_path: Path to the schema file.

    Returns:
        The file content.

    Raises:
        SchemaLoadError: If the file doesn't exist or cannot be read.
    """
    file_path = Path(file_path)
    logger.debug("Loading schema from file: %s", file_path)

    if not file_path.exists():
        raise SchemaLoadError(f"File not found: {file_path}")

    if file_path.suffix.lower() not in SCHEMA_EXTENSIONS:
        logger.warning("File does not have a GraphQL extension: %s", file_path)

    try:
        return file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaLoadError(f"Error reading file {file_path}: {e}") from e


def load_sdl_from_directory(directory: str | Path) -> str:
    """Load and concatenate every schema file in a directory (sorted by name).

    Raises:
        SchemaLoadError: If the directory holds no schema files.
    """
    directory = Path(directory)
    files = sorted(
        path
        for path in directory.rglob("*")
        if path.is_file() and path.suffix.lower() in SCHEMA_EXTENSIONS
    )

    if not files:
        raise SchemaLoadError(f"No schema files found in {directory}")

    logger.info("Loading %d schema files from %s", len(files), directory)
    return "\n".join(load_sdl_from_file(path) for path in files)


def load_sdl_from_url(url: str, timeout: int = 30) -> str:
    """Load SDL text from a URL.

    Args:
        url: URL to fetch the schema from.
        timeout: Request timeout in seconds.

    Raises:
        SchemaLoadError: If the URL is invalid or the request fails.
    """
    logger.debug("Loading schema from URL: %s", url)

    if not is_url(url):
        raise SchemaLoadError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        raise SchemaLoadError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        raise SchemaLoadError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise SchemaLoadError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        raise SchemaLoadError(f"Request error for URL {url}: {e}") from e

    logger.info("Loaded schema from %s", url)
    return response.text


def load_schema_source(source: str | Path, timeout: int = 30) -> str:
    """Load SDL text from a file, a directory or a URL."""
    if isinstance(source, str) and is_url(source):
        return load_sdl_from_url(source, timeout)

    path = Path(source)
    if path.is_dir():
        return load_sdl_from_directory(path)
    return load_sdl_from_file(path)


def load_schema(sources: Iterable[str | Path], timeout: int = 30) -> Schema:
    """Load and parse one schema from several sources.

    Sources are concatenated in the given order before parsing, so type
    extensions may live in a different file than their base type.

    Raises:
        SchemaLoadError: If no source is given, or loading or parsing fails.
    """
    texts = [load_schema_source(source, timeout) for source in sources]
    if not texts:
        raise SchemaLoadError("At least one schema source is required")

    return parse_schema("\n".join(texts))
