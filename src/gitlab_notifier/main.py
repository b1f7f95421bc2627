# src/gitlab_notifier/main.py
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from gitlab_notifier import __version__
from gitlab_notifier.config import Settings
from gitlab_notifier.notify.handlers import dispatch
from gitlab_notifier.senders.base import DeliveryError, Sender
from gitlab_notifier.senders.wecom import WeComSender


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_sender() -> Sender:
    settings = get_settings()
    return WeComSender(base_url=settings.wecom_webhook_url, timeout=settings.send_timeout)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.getLogger().setLevel(get_settings().log_level.upper())
    logger.info("GitLab Notifier starting...")
    yield
    logger.info("GitLab Notifier shutting down...")


app = FastAPI(title="GitLab Notifier", lifespan=lifespan)


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.post("/webhook/gitlab/{key}", response_class=PlainTextResponse)
async def gitlab_webhook(
    key: str,
    request: Request,
    x_gitlab_event: str | None = Header(None),
    x_gitlab_token: str | None = Header(None),
):
    settings = get_settings()

    # Verify webhook token only when a secret is configured
    if settings.gitlab_webhook_secret and x_gitlab_token != settings.gitlab_webhook_secret:
        raise HTTPException(status_code=401, detail="Invalid webhook token")

    body = await request.body()
    logger.info(f"Received GitLab event: {x_gitlab_event}")

    try:
        await dispatch(x_gitlab_event, key, body, get_sender())
    except ValidationError as e:
        logger.warning(f"Malformed {x_gitlab_event} payload: {e}")
        raise HTTPException(status_code=400, detail=f"Invalid payload: {e.error_count()} error(s)")
    except DeliveryError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return "OK"


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "gitlab_notifier.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
