from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import settings
from .managers.game import GameManager
from .routers import puzzle
from .rules import Rules, build_rules

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


def create_app(rules: Optional[Rules] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # A bad word list or letter table stops the server here.
        app.state.games = GameManager(rules if rules is not None else build_rules())
        yield
        logger.info("Stop Server")

    app = FastAPI(title="Lex Puzzle Server", version="0.1.0", lifespan=lifespan)

    # CORS for REST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    app.include_router(puzzle.router)
    return app


application = create_app()

# For local running: uvicorn lex.main:application --reload --host 0.0.0.0 --port 8000
