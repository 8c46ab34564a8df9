"""
FastAPI server for the Friendship Day greeting service.

Routes:
- ``/``            home page with the submission form
- ``/wish/web``    HTML greeting card
- ``/wish/text``   plain-text greeting card
- ``/wish``        either of the above, chosen by the ``Accept`` header
- ``/404``, ``/500`` styled error pages for manual checks
- ``/health``      liveness probe

Security headers are added to every response, including errors and redirects.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from core.config import Settings, settings
from core.greeting import render_greeting
from core.names import display_name, escape_text
from core.slug import slug_or_fallback
from core.validation import (
    MAX_NAME_LENGTH,
    MissingNameError,
    NameValidationError,
    validate_name,
)
from web.pages import WishCard, render_error, render_home, render_wish

logger = logging.getLogger("wishes.server")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all HTTP responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response


def build_card(request: Request, name: str, config: Settings) -> WishCard:
    """Collect every field a greeting page needs for an already-validated name."""
    slug = slug_or_fallback(name)
    host = escape_text(request.headers.get("host") or request.url.netloc)
    base_url = f"{config.public_scheme}://{host}"
    image_url = f"{config.image_service_url}?name={slug}"
    return WishCard(
        display_name=display_name(name),
        slug=slug,
        greeting=render_greeting(name),
        share_url=f"{base_url}/wish/web?name={slug}",
        text_url=f"{base_url}/wish/text",
        image_url=image_url,
        download_url=f"{config.image_download_url}?url={image_url}",
    )


def text_body(card: WishCard, greeting: str | None = None) -> str:
    return f"{greeting or card.greeting}\n\n Web View URL: {card.share_url}\n\n"


def create_app(config: Settings | None = None) -> FastAPI:
    """Build and return the FastAPI application."""

    config = config or settings
    app = FastAPI(title="Friendship Wishes", version="1.0.0", docs_url=None, redoc_url=None)
    app.state.settings = config

    app.add_middleware(SecurityHeadersMiddleware)

    # -- Error handling --------------------------------------------------------

    @app.exception_handler(NameValidationError)
    async def invalid_name(request: Request, exc: NameValidationError):
        logger.debug("Rejected name %r: %s", exc.name, exc.message)
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(MissingNameError)
    async def missing_name(request: Request, exc: MissingNameError):
        return PlainTextResponse(exc.message, status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return HTMLResponse(render_error(404, "Page Not Found"), status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    # -- Pages -----------------------------------------------------------------

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def home():
        return HTMLResponse(
            render_home(
                sample_image_url=f"{config.image_service_url}?name=Your-Name",
                max_length=MAX_NAME_LENGTH,
            )
        )

    @app.get("/404", response_class=HTMLResponse)
    async def not_found_page():
        return HTMLResponse(render_error(404, "Page Not Found"), status_code=404)

    @app.get("/500", response_class=HTMLResponse)
    async def server_error_page():
        return HTMLResponse(render_error(500, "Internal Server Error"), status_code=500)

    # -- Wishes ----------------------------------------------------------------

    @app.get("/wish/web", response_class=HTMLResponse)
    async def wish_web(request: Request, name: str | None = None):
        if not name:
            if config.redirect_missing_name:
                return RedirectResponse(url="/", status_code=303)
            raise MissingNameError()

        card = build_card(request, validate_name(name), config)
        return HTMLResponse(render_wish(card, max_length=MAX_NAME_LENGTH))

    @app.get("/wish/text", response_class=PlainTextResponse)
    async def wish_text(request: Request, name: str | None = None):
        if not name:
            raise MissingNameError()

        card = build_card(request, validate_name(name), config)
        return PlainTextResponse(text_body(card))

    @app.get("/wish")
    async def wish(request: Request, name: str | None = None, color: bool = False):
        """Serve HTML to browsers and plain text (optionally ANSI-coloured) to everyone else."""
        if not name:
            raise MissingNameError()

        card = build_card(request, validate_name(name), config)
        if "text/html" in request.headers.get("accept", ""):
            return HTMLResponse(render_wish(card, max_length=MAX_NAME_LENGTH))
        greeting = render_greeting(name, color=True) if color else None
        return PlainTextResponse(text_body(card, greeting))

    return app
