"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trusslayout.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Truss Layout Planner",
        description="Hip roof truss layout and layout-space member geometry",
        version="0.1.0",
    )

    # CORS — allow a local viewer
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
