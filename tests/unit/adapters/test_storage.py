"""
Storage Adapter 모듈 단위 테스트

이 모듈은 SQLite/메모리 키-값 저장소 어댑터의 기능을 테스트합니다.
"""

import pytest
import os
from insulin_calc.adapters.storage import build_kv_store
from insulin_calc.adapters.storage.sqlite_kv import SQLiteKVStore
from insulin_calc.adapters.storage.memory_kv import MemoryKVStore


class TestSQLiteKVStore:
    """SQLite 키-값 저장소 테스트"""

    @pytest.fixture
    def store(self, temp_db_path):
        """테스트용 SQLite 저장소"""
        return SQLiteKVStore(temp_db_path)

    @pytest.mark.asyncio
    async def test_initialization(self, store, temp_db_path):
        """초기화 테스트"""
        assert store.path == temp_db_path

    @pytest.mark.asyncio
    async def test_init_schema(self, store):
        """스키마 초기화 테스트"""
        await store.init()

        assert os.path.exists(store.path)
        assert await store.get("icr") is None

    @pytest.mark.asyncio
    async def test_init_is_idempotent(self, store):
        """스키마 초기화 반복 호출"""
        await store.init()
        await store.set("icr", "10")
        await store.init()

        assert await store.get("icr") == "10"

    @pytest.mark.asyncio
    async def test_get_missing(self, store):
        """없는 키 조회"""
        await store.init()

        assert await store.get("icr") is None

    @pytest.mark.asyncio
    async def test_set_and_get(self, store):
        """저장 후 조회"""
        await store.init()

        await store.set("icr", "10")
        await store.set("isf", "40")

        assert await store.get("icr") == "10"
        assert await store.get("isf") == "40"

    @pytest.mark.asyncio
    async def test_overwrite(self, store):
        """같은 키 덮어쓰기"""
        await store.init()

        await store.set("icr", "10")
        await store.set("icr", "12.5")

        assert await store.get("icr") == "12.5"

    @pytest.mark.asyncio
    async def test_delete(self, store):
        """키 삭제"""
        await store.init()
        await store.set("icr", "10")

        await store.delete("icr")
        await store.delete("missing")

        assert await store.get("icr") is None

    @pytest.mark.asyncio
    async def test_persists_across_instances(self, temp_db_path):
        """다른 인스턴스에서 같은 파일 조회 (재시작 후 유지)"""
        first = SQLiteKVStore(temp_db_path)
        await first.init()
        await first.set("isf", "45")

        second = SQLiteKVStore(temp_db_path)
        await second.init()

        assert await second.get("isf") == "45"

    @pytest.mark.asyncio
    async def test_ping(self, store):
        """초기화 후 ping 성공"""
        await store.init()

        assert await store.ping() is True

    @pytest.mark.asyncio
    async def test_ping_without_schema(self, tmp_path):
        """스키마 없는 DB 는 ping 실패"""
        store = SQLiteKVStore(str(tmp_path / "empty.db"))

        assert await store.ping() is False


class TestMemoryKVStore:
    """메모리 키-값 저장소 테스트"""

    @pytest.mark.asyncio
    async def test_roundtrip(self, memory_kv):
        """저장/조회/삭제"""
        await memory_kv.init()
        await memory_kv.set("icr", "10")

        assert await memory_kv.get("icr") == "10"
        assert memory_kv.state == {"icr": "10"}

        await memory_kv.delete("icr")
        assert await memory_kv.get("icr") is None

    @pytest.mark.asyncio
    async def test_initial_values(self):
        """초기값 복사"""
        initial = {"icr": "10"}
        store = MemoryKVStore(initial)
        await store.set("icr", "20")

        assert initial["icr"] == "10"
        assert await store.ping() is True


class TestBuildKVStore:
    """저장소 팩토리 테스트"""

    def test_sqlite(self, temp_db_path):
        assert isinstance(build_kv_store("sqlite", temp_db_path), SQLiteKVStore)

    def test_memory(self):
        assert isinstance(build_kv_store("memory", ""), MemoryKVStore)

    def test_unknown(self):
        with pytest.raises(ValueError):
            build_kv_store("redis", "")
