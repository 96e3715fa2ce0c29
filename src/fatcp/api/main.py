# src/fatcp/api/main.py
from fastapi import APIRouter, FastAPI

from fatcp.core.config import get_settings
from fatcp.core.logging import configure_logging
from fatcp.core.registry import load_module_routers
from fatcp.version import get_version


def create_app(routers: list[APIRouter] | None = None) -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="fatcp", version=get_version())
    configure_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)

    for r in load_module_routers() if routers is None else routers:
        app.include_router(r, prefix="/api")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
