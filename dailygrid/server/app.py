from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dailygrid import __version__
from dailygrid.config import get_config
from dailygrid.logging import configure_logging
from dailygrid.server.routers.search import router as search_router
from dailygrid.server.runtime import get_runtime_async, reset_runtime


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic."""
    config = get_config()
    configure_logging(config.log_level, config.log_json)
    await get_runtime_async(config)
    yield
    await reset_runtime()


app = FastAPI(
    title="dailygrid",
    description="Daily Grid search - ranked search across profiles, forum, games and badges",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(search_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
