"""
테스트 설정 및 픽스처

이 모듈은 pytest 설정과 공통 픽스처를 제공합니다.
"""

import pytest
import tempfile
import os
from insulin_calc.settings import Settings
from insulin_calc.adapters.storage.memory_kv import MemoryKVStore
from insulin_calc.services.settings_store import SettingsStore
from insulin_calc.core.models import DoseInputs


@pytest.fixture
def temp_db_path():
    """임시 데이터베이스 파일 경로"""
    with tempfile.NamedTemporaryFile(suffix='.db', delete=False) as f:
        temp_path = f.name
    yield temp_path
    # 테스트 후 파일 정리
    if os.path.exists(temp_path):
        os.unlink(temp_path)


@pytest.fixture
def sample_settings():
    """테스트용 설정"""
    settings = Settings()
    settings.storage.backend = "memory"
    settings.observability.service_name = "test-service"
    settings.observability.build_version = "1.0.0"
    settings.observability.log_level = "INFO"
    settings.observability.http_port = 8080
    return settings


@pytest.fixture
def memory_kv():
    """비어 있는 메모리 저장소"""
    return MemoryKVStore()


@pytest.fixture
def configured_kv():
    """ICR 1:10, ISF 1:40 이 저장된 메모리 저장소"""
    return MemoryKVStore({"icr": "10", "isf": "40"})


@pytest.fixture
def settings_store(configured_kv):
    """설정이 저장된 SettingsStore"""
    return SettingsStore(configured_kv)


@pytest.fixture
def scenario_a_inputs():
    """시나리오 A: 혈당 180 -> 100, 탄수화물 60g"""
    return DoseInputs(current_bg=180, target_bg=100, carbs=60, icr=10, isf=40)


@pytest.fixture
def scenario_b_inputs():
    """시나리오 B: 혈당 90 -> 120, 탄수화물 0g"""
    return DoseInputs(current_bg=90, target_bg=120, carbs=0, icr=10, isf=40)


# pytest 설정
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "slow: 느린 테스트 마커"
    )
    config.addinivalue_line(
        "markers", "integration: 통합 테스트 마커"
    )


def pytest_collection_modifyitems(config, items):
    """테스트 아이템 수정"""
    for item in items:
        # 통합 테스트 마커 추가
        if "integration" in item.name or "test_scenarios.py" in item.nodeid:
            item.add_marker(pytest.mark.integration)
