"""Loading of schema and operation sources.

A source is a glob pattern (or several, comma separated), an http(s) URL
serving SDL text, or an archive of schema files. Relative patterns are
resolved against an explicit base path; nothing here reads the process
working directory.
"""

import glob
import logging
import os
import shutil
import tarfile
import tempfile
import zipfile
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIXES = (".zip", ".tar.gz", ".tgz")
SCHEMA_SUFFIXES = (".graphql", ".graphqls", ".gql")


class SourceError(Exception):
    """Raised when a source cannot be resolved or read."""


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def is_archive(path: str) -> bool:
    return path.lower().endswith(ARCHIVE_SUFFIXES)


def with_base_path(pattern: str, base_path: str | Path) -> str:
    """Anchor a relative pattern at the base path. Absolute patterns are kept."""
    return os.path.join(str(base_path), pattern.strip())


def glob_paths(pattern: str, base_path: str | Path) -> list[str]:
    """Return the unique files matching one or more comma-separated patterns."""
    paths: list[str] = []
    for partial in pattern.split(","):
        if not partial.strip():
            continue
        for match in sorted(glob.glob(with_base_path(partial, base_path), recursive=True)):
            if match not in paths:
                paths.append(match)
    return paths


def extract_archive(archive_path: Path) -> str:
    """Extract archive to temp directory. Returns path to extracted content."""
    temp_dir = tempfile.mkdtemp()
    name = archive_path.name.lower()
    if name.endswith(".zip"):
        with zipfile.ZipFile(archive_path, "r") as zip_ref:
            zip_ref.extractall(temp_dir)
    elif name.endswith((".tar.gz", ".tgz")):
        with tarfile.open(archive_path, "r:gz") as tar_ref:
            try:
                # Rejects members pointing outside temp_dir
                tar_ref.extractall(temp_dir, filter="data")
            except tarfile.FilterError as e:
                shutil.rmtree(temp_dir)
                raise SourceError(f"Unsafe member in archive {archive_path}: {e}") from e
    else:
        shutil.rmtree(temp_dir)
        raise ValueError(f"Unsupported archive format: {archive_path.suffix}")
    return temp_dir


def read_archive(archive_path: Path) -> str:
    """Concatenate every schema file found inside an archive."""
    temp_dir = extract_archive(archive_path)
    try:
        files = []
        for root, _, filenames in os.walk(temp_dir):
            for filename in filenames:
                if filename.endswith(SCHEMA_SUFFIXES):
                    files.append(os.path.join(root, filename))
        return get_file_content(sorted(files))
    finally:
        shutil.rmtree(temp_dir)


def fetch_source(url: str, timeout: float = 30.0, client: httpx.Client | None = None) -> str:
    """Download SDL or operation text from a URL.

    Raises:
        SourceError: on transport errors and non-success responses
    """
    owns_client = client is None
    client = client or httpx.Client(timeout=timeout)
    try:
        response = client.get(url)
        response.raise_for_status()
        return response.text
    except httpx.HTTPStatusError as e:
        raise SourceError(f"HTTP error {e.response.status_code} fetching {url}") from e
    except httpx.RequestError as e:
        raise SourceError(f"Request failed for {url}: {e}") from e
    finally:
        if owns_client:
            client.close()


def get_file_content(paths: list[str]) -> str:
    """Return the concatenated content of the given files."""
    contents = []
    for path in paths:
        with open(path) as f:
            contents.append(f.read())
    return "\n".join(contents)


def load_sources(
    sources: list[str],
    base_path: str | Path,
    client: httpx.Client | None = None,
) -> str:
    """Resolve every source to text and concatenate them in order.

    Raises:
        SourceError: if a pattern matches no file or a URL cannot be fetched
    """
    contents = []
    for source in sources:
        if is_url(source):
            logger.debug(f"Fetching {source}")
            contents.append(fetch_source(source, client=client))
            continue

        paths = glob_paths(source, base_path)
        if not paths:
            raise SourceError(f"No files match '{source}' in {base_path}")
        for path in paths:
            logger.debug(f"Reading {path}")
            if is_archive(path):
                contents.append(read_archive(Path(path)))
            else:
                contents.append(get_file_content([path]))
    return "\n".join(contents)
