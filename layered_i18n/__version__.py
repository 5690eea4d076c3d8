"""Version information for layered-i18n."""

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history
# 0.1.0 - Merged YAML locale store with lazy cache, config and event bus
