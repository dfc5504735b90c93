"""Serves the browser service worker that renders push notifications."""

from fastapi import APIRouter
from fastapi.responses import Response
from pathlib import Path
import json

from portal.config.settings import get_settings

router = APIRouter(tags=["push"])

SERVICE_WORKER_PATH = Path(__file__).resolve().parent.parent / "static" / "firebase-messaging-sw.js"
CONFIG_PLACEHOLDER = "__FIREBASE_CONFIG__"


def render_service_worker() -> str:
    """Service worker source with the Firebase web config substituted."""
    source = SERVICE_WORKER_PATH.read_text(encoding="utf-8")
    config = json.dumps(get_settings().push.get_web_config(), indent=2)
    return source.replace(CONFIG_PLACEHOLDER, config)


@router.get("/firebase-messaging-sw.js", include_in_schema=False)
async def firebase_messaging_sw():
    # Must be served from the site root so its scope covers every page
    return Response(
        content=render_service_worker(),
        media_type="application/javascript",
        headers={"Service-Worker-Allowed": "/", "Cache-Control": "no-cache"},
    )
