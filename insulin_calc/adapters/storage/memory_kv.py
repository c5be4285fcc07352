"""
In-memory key-value store for the insulin dose calculator.

Used by tests and by the "memory" storage backend, where
settings only need to live as long as the process.
"""

from typing import Dict, Optional

class MemoryKVStore:
    """메모리 기반 키-값 저장소"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.state: Dict[str, str] = dict(initial or {})

    async def init(self) -> None:
        return None

    async def get(self, key: str) -> Optional[str]:
        return self.state.get(key)

    async def set(self, key: str, value: str) -> None:
        self.state[key] = value

    async def delete(self, key: str) -> None:
        self.state.pop(key, None)

    async def ping(self) -> bool:
        return True
