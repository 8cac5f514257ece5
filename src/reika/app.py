"""FastAPI process host: runs the Discord bot in the lifespan and serves /health."""

import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from reika.config import get_settings
from reika.discord.supervisor import BotSupervisor
from reika.logging_config import configure_logging

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def _log_supervisor_exit(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.critical("Discord supervisor stopped: %s", exc, exc_info=exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging, load config, and run the bot.

    Missing credentials raise ConfigurationError here, which aborts startup.
    """
    configure_logging()
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    supervisor = BotSupervisor(settings)
    task = asyncio.create_task(supervisor.run_forever(), name="discord-supervisor")
    task.add_done_callback(_log_supervisor_exit)

    app.state.settings = settings
    app.state.supervisor = supervisor
    app.state.supervisor_task = task
    yield

    task.cancel()
    await asyncio.gather(task, return_exceptions=True)


app = FastAPI(
    title="Reika",
    lifespan=lifespan,
)


@app.get("/health")
async def health(request: Request):
    """Health check endpoint for container platforms and local development.

    Returns 503 with status "error" once the Discord supervisor task has
    ended with an exception, such as a rejected token.
    """
    supervisor = getattr(request.app.state, "supervisor", None)
    task = getattr(request.app.state, "supervisor_task", None)
    body = {
        "status": "ok",
        "service": "reika",
        "version": VERSION,
        "discord": "connected" if supervisor and supervisor.connected else "disconnected",
    }
    if task is not None and task.done() and not task.cancelled() and task.exception() is not None:
        body["status"] = "error"
        body["discord"] = "stopped"
        return JSONResponse(body, status_code=503)
    return body


def main() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)
