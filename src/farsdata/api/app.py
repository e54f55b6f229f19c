from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from farsdata.api.routes_states import router as states_router
from farsdata.api.routes_summary import router as summary_router
from farsdata.logging_config import configure_logging
from farsdata.settings import get_config


def create_app() -> FastAPI:
    configure_logging()
    config = get_config()

    app = FastAPI(title="FARS Data API", version="0.1.0")

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors.allow_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(summary_router, tags=["summary"])
    app.include_router(states_router, tags=["states"])

    return app
