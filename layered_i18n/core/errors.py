"""Exceptions raised while loading locale data."""

import os

__all__ = ["I18nError", "PathNotFoundError", "InvalidDocumentError"]


class I18nError(Exception):
    """Base class for layered_i18n errors."""


class PathNotFoundError(I18nError, FileNotFoundError):
    """A registered locale path does not exist."""

    def __init__(self, path: str | os.PathLike):
        self.path = os.fspath(path)
        super().__init__(f"Path {self.path} not found when loading locale files")


class InvalidDocumentError(I18nError, ValueError):
    """A locale file does not contain a mapping at its top level."""

    def __init__(self, file_path: str | os.PathLike, found: type):
        self.file_path = os.fspath(file_path)
        self.found = found
        super().__init__(
            f"Locale file {self.file_path} must contain a mapping, got {found.__name__}"
        )
