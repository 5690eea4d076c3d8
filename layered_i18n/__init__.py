"""Locale lookup over YAML files merged from several directories.

Structure:
    - core/store.py: LocaleStore and the global store accessor
    - core/merge.py: deep merge of nested translation mappings
    - core/loader.py: YAML directory and in-memory document loaders
    - core/config_loader.py: YAML configuration with env overrides
"""

from .__version__ import __version__
from .core.config_loader import load_config
from .core.config_schema import DEFAULT_LOCALE, I18nConfig
from .core.errors import I18nError, InvalidDocumentError, PathNotFoundError
from .core.event_bus import Event, EventBus
from .core.events import EventType
from .core.loader import DocumentLoader, StaticLoader, YamlDirectoryLoader
from .core.merge import deep_merge, merge_pair
from .core.store import LocaleStore, get_store, reset_store

__all__ = [
    "__version__",
    "DEFAULT_LOCALE",
    "DocumentLoader",
    "Event",
    "EventBus",
    "EventType",
    "I18nConfig",
    "I18nError",
    "InvalidDocumentError",
    "LocaleStore",
    "PathNotFoundError",
    "StaticLoader",
    "YamlDirectoryLoader",
    "deep_merge",
    "get_store",
    "load_config",
    "merge_pair",
    "reset_store",
]
