#!/usr/bin/env python3
"""Document loaders that turn a locale path into parsed structures.

A loader is any object with ``load_documents(path)`` returning the nested
mappings found at ``path`` in merge order. Missing paths raise
:class:`PathNotFoundError`.
"""

import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

import yaml

from layered_i18n.core.errors import InvalidDocumentError, PathNotFoundError
from layered_i18n.core.logging_utils import setup_logger

__all__ = ["DocumentLoader", "YamlDirectoryLoader", "StaticLoader", "DEFAULT_PATTERN"]

logger = setup_logger(__name__)

DEFAULT_PATTERN = "**/*.yml"


class DocumentLoader(Protocol):
    """Source of nested structures for a locale path."""

    def load_documents(self, path: str | os.PathLike) -> list[Mapping[str, Any]]: ...


class YamlDirectoryLoader:
    """Load every YAML file below a directory.

    Files are read in sorted relative-path order so the merge order is stable
    for a given directory tree.
    """

    def __init__(self, pattern: str = DEFAULT_PATTERN, encoding: str = "utf-8"):
        """Initialize loader.

        Args:
            pattern: Glob pattern relative to each locale path
            encoding: Text encoding of the YAML files
        """
        self.pattern = pattern
        self.encoding = encoding

    def load_documents(self, path: str | os.PathLike) -> list[Mapping[str, Any]]:
        """Parse all matching YAML files at path.

        Args:
            path: Directory (or single file) holding locale files

        Returns:
            Parsed top-level mappings in file order

        Raises:
            PathNotFoundError: If path does not exist
            InvalidDocumentError: If a file's top level is not a mapping
            yaml.YAMLError: If a file is not valid YAML
        """
        root = Path(path)
        if not root.exists():
            raise PathNotFoundError(path)

        if root.is_file():
            files = [root]
        else:
            files = sorted(p for p in root.glob(self.pattern) if p.is_file())

        documents = []
        for file_path in files:
            document = self._load_file(file_path)
            if document is not None:
                documents.append(document)

        logger.debug(f"Loaded {len(documents)} locale file(s) from {root}")
        return documents

    def _load_file(self, file_path: Path) -> Mapping[str, Any] | None:
        with open(file_path, encoding=self.encoding) as f:
            document = yaml.safe_load(f)

        if document is None:
            logger.debug(f"Skipping empty locale file {file_path}")
            return None
        if not isinstance(document, Mapping):
            raise InvalidDocumentError(file_path, type(document))
        return document


class StaticLoader:
    """In-memory loader keyed by path.

    Useful for embedding translations without touching disk, and for
    observing how often a store reloads its sources.
    """

    def __init__(self, documents: Mapping[str, Sequence[Mapping[str, Any]]] | None = None):
        self.documents: dict[str, list[Mapping[str, Any]]] = {
            os.fspath(path): list(docs) for path, docs in (documents or {}).items()
        }
        self.load_counts: dict[str, int] = {}

    def add(self, path: str | os.PathLike, *documents: Mapping[str, Any]):
        """Register documents under path, after any already registered."""
        self.documents.setdefault(os.fspath(path), []).extend(documents)

    def load_documents(self, path: str | os.PathLike) -> list[Mapping[str, Any]]:
        key = os.fspath(path)
        self.load_counts[key] = self.load_counts.get(key, 0) + 1
        if key not in self.documents:
            raise PathNotFoundError(path)
        return list(self.documents[key])
