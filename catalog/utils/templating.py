"""Jinja2 template rendering for catalog pages."""

from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import HTMLResponse

from catalog.settings import app_settings

templates = Jinja2Templates(directory=app_settings.TEMPLATES_DIR)


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    """
    Render a template into an HTML response.

    Args:
        request: The current request (exposed to templates).
        name: Template file name, e.g. ``genre_list.html``.
        context: Payload of named fields for the template.
        status_code: HTTP status of the response.

    Returns:
        The rendered page.
    """
    return templates.TemplateResponse(
        request, name, context or {}, status_code=status_code
    )
