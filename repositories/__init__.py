# -*- coding: utf-8 -*-
"""
Damage Survey Repository Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SQLiteKeyValueStore",
    "SubmissionStore",
    "load_catalog",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "KeyValueStore":
        from .kv_store import KeyValueStore
        return KeyValueStore
    elif name == "InMemoryKeyValueStore":
        from .kv_store import InMemoryKeyValueStore
        return InMemoryKeyValueStore
    elif name == "SQLiteKeyValueStore":
        from .kv_store import SQLiteKeyValueStore
        return SQLiteKeyValueStore
    elif name == "SubmissionStore":
        from .submission_repository import SubmissionStore
        return SubmissionStore
    elif name == "load_catalog":
        from .seed import load_catalog
        return load_catalog
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
