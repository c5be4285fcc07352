"""
Storage adapters for the insulin dose calculator.

This module contains storage adapters for persisting the
ratio settings, backed by SQLite or process memory.
"""

from .sqlite_kv import SQLiteKVStore
from .memory_kv import MemoryKVStore

__all__ = ["SQLiteKVStore", "MemoryKVStore", "build_kv_store"]

def build_kv_store(backend: str, path: str):
    """설정의 backend 값으로 저장소 어댑터를 생성합니다."""
    if backend == "sqlite":
        return SQLiteKVStore(path)
    if backend == "memory":
        return MemoryKVStore()
    raise ValueError(f"unknown storage backend: {backend}")
