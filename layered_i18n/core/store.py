#!/usr/bin/env python3
"""Locale store: merged translation lookup with a lazily rebuilt cache.

The store keeps an ordered list of locale paths and the active locale. The
first lookup after any change loads every path through the document loader,
deep-merges the results (later paths win) and caches the merged table until
the next change.

Examples:
    Basic lookup::

        from layered_i18n import LocaleStore
        store = LocaleStore("locales")
        store.t("greeting.hello")  # "Hi"

    Switching locale::

        store.locale = "fr"
        store.t("greeting.hello")  # "Salut"
"""

import copy
import os
import threading
import time
from collections.abc import Mapping
from typing import Any

from layered_i18n.core.config_schema import (
    DEFAULT_LOCALE,
    I18nConfig,
    config_to_dict,
    validate_config,
)
from layered_i18n.core.event_bus import EventBus
from layered_i18n.core.events import EventType
from layered_i18n.core.loader import DocumentLoader, YamlDirectoryLoader
from layered_i18n.core.logging_utils import configure_logging, setup_logger
from layered_i18n.core.merge import deep_merge

__all__ = ["DEFAULT_LOCALE", "LocaleStore", "get_store", "reset_store"]

logger = setup_logger(__name__)

KEY_SEPARATOR = "."


class LocaleStore:
    """Translation lookup over merged locale files.

    Note:
        All public methods hold the store lock, so a locale change or path
        append can never interleave with a rebuild in progress.
    """

    def __init__(
        self,
        *locale_paths,
        locale: str = DEFAULT_LOCALE,
        loader: DocumentLoader | None = None,
        event_bus: EventBus | None = None,
    ):
        """Initialize locale store.

        Args:
            *locale_paths: Initial locale paths; nested lists and tuples are flattened
            locale: Active locale identifier
            loader: Document loader (default: YamlDirectoryLoader)
            event_bus: Optional event bus for lifecycle notifications
        """
        self._locale = str(locale)
        self._locale_paths: list[str | os.PathLike] = _flatten(locale_paths)
        self._cache: dict[str, Any] | None = None
        self._loader = loader or YamlDirectoryLoader()
        self._event_bus = event_bus
        self._lock = threading.RLock()

    @classmethod
    def from_config(
        cls,
        config: I18nConfig | dict[str, Any],
        loader: DocumentLoader | None = None,
        event_bus: EventBus | None = None,
    ) -> "LocaleStore":
        """Build a store from a validated config or a raw config dict.

        Args:
            config: I18nConfig or dictionary accepted by validate_config()
            loader: Document loader (default: YamlDirectoryLoader with the
                configured file pattern)
            event_bus: Optional event bus
        """
        if not isinstance(config, I18nConfig):
            config = validate_config(config)
        return cls(
            config.locale_paths,
            locale=config.default_locale,
            loader=loader or YamlDirectoryLoader(pattern=config.file_pattern),
            event_bus=event_bus,
        )

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, locale: str):
        self.set_locale(locale)

    @property
    def locale_paths(self) -> tuple:
        with self._lock:
            return tuple(self._locale_paths)

    @property
    def cache(self) -> dict[str, Any] | None:
        """Merged table from the last rebuild, or None when stale."""
        return self._cache

    @property
    def is_cached(self) -> bool:
        return self._cache is not None

    def append_locale_path(self, path: str | os.PathLike):
        """Register another locale path with the highest precedence so far.

        The path is not checked here; a missing path surfaces as
        PathNotFoundError on the next lookup.
        """
        with self._lock:
            self._invalidate("path_appended")
            self._locale_paths.append(path)
            self._emit(EventType.LOCALE_PATH_APPENDED, {"path": os.fspath(path)})

    def set_locale(self, locale: str):
        """Set the active locale.

        Calling this method clears the cache even if the locale is unchanged.
        """
        with self._lock:
            self._invalidate("locale_changed")
            old_locale, self._locale = self._locale, str(locale)
            if old_locale != self._locale:
                logger.info(f"Locale changed: {old_locale} -> {self._locale}")
                self._emit(
                    EventType.LOCALE_CHANGED,
                    {"old_locale": old_locale, "new_locale": self._locale},
                )

    def reset(self):
        """Clear the cache.

        Call after changing locale sources behind the store's back (editing
        files on disk, mutating a loader directly). append_locale_path()
        resets the cache on its own.
        """
        with self._lock:
            self._invalidate("reset")

    invalidate = reset

    def lookup(self, key: Any, default: Any = None) -> Any:
        """Retrieve the value at a dotted key such as 'a.b.c'.

        Args:
            key: Dotted key; non-string keys are converted with str()
            default: Returned when the key does not resolve

        Returns:
            The stored value, or default if any segment is missing. Mappings
            are shared with the cache; treat them as read-only. reset()
            discards any changes made to them.

        Raises:
            PathNotFoundError: If a registered locale path does not exist
        """
        with self._lock:
            node: Any = self._ensure_cache().get(self._locale)
            for segment in str(key).split(KEY_SEPARATOR):
                if not isinstance(node, Mapping) or segment not in node:
                    return default
                node = node[segment]
            return node

    def t(self, key: Any, default: Any = None) -> Any:
        """Translate a key to the current locale."""
        return self.lookup(key, default)

    def translations(self) -> Mapping[str, Any]:
        """Merged structure for the active locale (empty if none)."""
        with self._lock:
            node = self._ensure_cache().get(self._locale)
            return node if isinstance(node, Mapping) else {}

    def available_locales(self) -> list[str]:
        """Locales present in the merged table."""
        with self._lock:
            return sorted(str(locale) for locale in self._ensure_cache())

    def _invalidate(self, reason: str):
        if self._cache is not None:
            logger.debug(f"Locale cache invalidated ({reason})")
        self._cache = None
        self._emit(EventType.CACHE_INVALIDATED, {"reason": reason})

    def _ensure_cache(self) -> dict[str, Any]:
        if self._cache is None:
            self._cache = self._rebuild()
        return self._cache

    def _rebuild(self) -> dict[str, Any]:
        """Load every locale path and merge them in path order."""
        start = time.perf_counter()
        logger.debug(f"Rebuilding locale cache from {len(self._locale_paths)} path(s)")

        per_path = []
        for path in self._locale_paths:
            try:
                documents = self._loader.load_documents(path)
            except Exception as e:
                logger.error(f"Locale cache rebuild failed at {os.fspath(path)}: {e}")
                self._emit(
                    EventType.CACHE_REBUILD_FAILED,
                    {"path": os.fspath(path), "error": str(e)},
                )
                raise
            per_path.append(deep_merge(documents))

        # Detached from loader documents so a reset always restores them
        table = copy.deepcopy(dict(deep_merge(per_path)))
        duration_ms = (time.perf_counter() - start) * 1000

        logger.info(
            f"Locale cache rebuilt: {len(self._locale_paths)} path(s), "
            f"{len(table)} locale(s) in {duration_ms:.1f}ms"
        )
        self._emit(
            EventType.CACHE_REBUILT,
            {
                "paths": len(self._locale_paths),
                "locales": sorted(str(locale) for locale in table),
                "duration_ms": duration_ms,
            },
        )
        return table

    def _emit(self, event_type: EventType, payload: dict[str, Any]):
        if self._event_bus is not None:
            self._event_bus.emit(event_type, payload, source="locale_store")

    def __repr__(self) -> str:
        state = "cached" if self._cache is not None else "stale"
        return f"LocaleStore(locale={self._locale!r}, paths={len(self._locale_paths)}, {state})"


def _flatten(paths) -> list:
    flat = []
    for path in paths:
        if isinstance(path, (list, tuple)):
            flat.extend(_flatten(path))
        else:
            flat.append(path)
    return flat


# Global store instance
_store: LocaleStore | None = None


def get_store(config: I18nConfig | dict[str, Any] | None = None) -> LocaleStore:
    """Get the global locale store.

    Args:
        config: Configuration (only used on first call; its logging section
            is applied as well)

    Returns:
        LocaleStore instance
    """
    global _store
    if _store is None:
        if not isinstance(config, I18nConfig):
            config = validate_config(config or {})
        configure_logging(config_to_dict(config))
        _store = LocaleStore.from_config(config)
    return _store


def reset_store():
    """Drop the global locale store."""
    global _store
    _store = None
