from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from nimm import __version__
from nimm.api.routes import router
from nimm.session_registry import registry
from nimm.settings import get_settings

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    logger.info("nimm %s ready", __version__)
    yield
    # Connections still open here outlived the server's graceful shutdown window.
    forced = await registry.close_all()
    logger.info("stopped; %d session(s) force-closed", forced)


app = FastAPI(title="nimm", version=__version__, lifespan=lifespan)
app.include_router(router)
