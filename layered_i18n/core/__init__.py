"""Core locale store, merge, loading, and support modules."""
