"""Utility functions for loading JSON Schema documents.

This module provides functions for loading JSON from files and URLs with
proper error handling, and for decoding the result into a schema model.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .codegen.core.schema import SchemaDocument, parse_schema_document
from .logging_config import get_logger

logger = get_logger(__name__)

URL_SCHEMES = ("http", "https")


class JSONLoaderError(Exception):
    """Custom exception for JSON loading errors."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If the file is missing, unreadable or not valid JSON.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load JSON from file: %s", file_path)

    if not file_path.exists():
        logger.debug("File not found: %s", file_path)
        raise JSONLoaderError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise JSONLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info("Loaded JSON from %s", file_path)
    return str(file_path), data


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load JSON data from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug("Attempting to load JSON from URL: %s", url)

    parsed_url = urlparse(url)
    if parsed_url.scheme not in URL_SCHEMES or not parsed_url.netloc:
        raise JSONLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "").lower()
        if "json" not in content_type and not url.endswith(".json"):
            logger.warning("URL %s does not have JSON content type: %s", url, content_type)

        data = response.json()
    except requests.exceptions.Timeout as e:
        raise JSONLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        raise JSONLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        raise JSONLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.JSONDecodeError as e:
        raise JSONLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        raise JSONLoaderError(f"Request error for URL {url}: {e}") from e
    except ValueError as e:
        raise JSONLoaderError(f"Invalid JSON response from URL {url}: {e}") from e

    logger.info("Loaded JSON from %s", url)
    return url, data


def is_url(source: str | Path) -> bool:
    """Return True when `source` names an http(s) resource."""
    return isinstance(source, str) and urlparse(source).scheme in URL_SCHEMES


def load_json(source: str | Path, timeout: int = 30) -> tuple[str, Any]:
    """Load JSON data from either a file path or an http(s) URL.

    Args:
        source: Local path or URL.
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If no source is given or loading fails.
    """
    if not source:
        raise JSONLoaderError("A schema file path or URL must be provided")

    if is_url(source):
        return load_json_from_url(str(source), timeout)
    return load_json_from_file(source)


def load_schema(source: str | Path, timeout: int = 30) -> SchemaDocument:
    """Load and decode a JSON Schema document.

    Raises:
        JSONLoaderError: If the document cannot be loaded.
        SchemaDecodeError: If the document does not have the shape of a schema.
    """
    description, data = load_json(source, timeout)
    return parse_schema_document(data, description)
