"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from iconopt import __version__
from iconopt.config import settings
from iconopt.engine.registry import register_plugins

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.iconopt_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="iconopt",
        description="SVG icon optimizer — path normalization and markup cleanup",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all plugin modules to trigger registration
    register_plugins()

    from iconopt.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
