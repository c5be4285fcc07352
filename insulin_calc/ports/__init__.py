"""
Port interfaces for the insulin dose calculator.

This module defines the port interfaces (Protocols) that define
the contracts between the core domain and external adapters.
"""

from .kvstore import KVStorePort

__all__ = ["KVStorePort"]
