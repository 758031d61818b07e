import asyncio

from dailygrid.config import Config, get_config
from dailygrid.database import Database
from dailygrid.logging import get_logger
from dailygrid.search import SearchService
from dailygrid.store import init_schema

_logger = get_logger(__name__)


class Runtime:
    def __init__(self, config: Config | None = None):
        self.config = config or get_config()
        self.db = Database(self.config.database_path)
        self.search: SearchService | None = None
        self._connected = False

    async def connect(self) -> None:
        if self._connected:
            return

        self.config.db_dir.mkdir(parents=True, exist_ok=True)
        await self.db.connect()
        await init_schema(self.db.conn)
        self.search = SearchService(self.db.conn, self.config)
        self._connected = True
        _logger.info("Runtime connected (db=%s)", self.config.database_path)

    async def close(self) -> None:
        await self.db.close()
        self.search = None
        self._connected = False


_runtime: Runtime | None = None
_runtime_lock = asyncio.Lock()


async def get_runtime_async(config: Config | None = None) -> Runtime:
    global _runtime
    async with _runtime_lock:
        if _runtime is None:
            _runtime = Runtime(config)
            await _runtime.connect()
    return _runtime


def get_runtime() -> Runtime:
    global _runtime
    if _runtime is None:
        raise RuntimeError("Runtime not initialized. Call get_runtime_async() first.")
    if not _runtime._connected:
        raise RuntimeError("Runtime not connected. Call await runtime.connect() first.")
    return _runtime


async def reset_runtime() -> None:
    global _runtime
    if _runtime is not None:
        await _runtime.close()
        _runtime = None
