"""
Adapters for the insulin dose calculator.

This module contains the concrete implementations of port interfaces
that handle external I/O and infrastructure concerns.
"""

from .storage import SQLiteKVStore, MemoryKVStore

__all__ = ["SQLiteKVStore", "MemoryKVStore"]
