# insulin_calc/main.py
import os, asyncio, signal
import uvicorn
from insulin_calc.settings import Settings
from insulin_calc.observability.health import create_app
from insulin_calc.observability.logging_setup import setup_logging, get_logger
from insulin_calc.adapters.storage import build_kv_store

def _b(name, default=False): return os.getenv(name, str(default)).lower() in ("1","true","yes","on")

def build_settings() -> Settings:
    s = Settings()

    # 저장소
    s.storage.backend = os.getenv("STORAGE_BACKEND", s.storage.backend)
    s.storage.path = os.getenv("STORAGE_PATH", s.storage.path)

    # 관측성
    s.observability.log_level = os.getenv("LOG_LEVEL", s.observability.log_level)
    s.observability.log_json = _b("LOG_JSON", s.observability.log_json)
    s.observability.metrics_enabled = _b("METRICS_ENABLED", s.observability.metrics_enabled)
    s.observability.http_host = os.getenv("HTTP_HOST", s.observability.http_host)
    s.observability.http_port = int(os.getenv("HTTP_PORT", s.observability.http_port))

    # 표시
    s.calculator.display_decimals = int(os.getenv("DISPLAY_DECIMALS", s.calculator.display_decimals))

    return s

async def main():
    s = build_settings()
    setup_logging(s.observability.log_level, s.observability.log_json)
    log = get_logger()
    log.info("설정 로드 완료")

    kv = build_kv_store(s.storage.backend, s.storage.path)

    app = create_app(s, kv)
    server = uvicorn.Server(uvicorn.Config(
        app,
        host=s.observability.http_host,
        port=s.observability.http_port,
        log_level=s.observability.log_level.lower()
    ))

    stop = asyncio.Future()
    try:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGTERM, signal.SIGINT):
            try: loop.add_signal_handler(sig, lambda: (not stop.done()) and stop.set_result(True))
            except NotImplementedError: pass
    except RuntimeError: pass

    log.info(f"HTTP 서버 시작 host:{s.observability.http_host} port:{s.observability.http_port}")
    http_task = asyncio.create_task(server.serve())
    await asyncio.wait([http_task, stop], return_when=asyncio.FIRST_COMPLETED)
    server.should_exit = True
    await http_task
    log.info("서버 종료")

def run():
    asyncio.run(main())

if __name__ == "__main__":
    run()
