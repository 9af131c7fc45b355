"""Catalog home page."""

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from catalog.commands.book_commands import GetCatalogCountsCommand
from catalog.constants import CATALOG_PREFIX
from catalog.dependencies import AuthorRepoDep, BookRepoDep, GenreRepoDep
from catalog.utils.error_handler import handle_http_errors
from catalog.utils.templating import render

router = APIRouter(tags=["catalog"])


@router.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(
        CATALOG_PREFIX, status_code=status.HTTP_303_SEE_OTHER
    )


@router.get(CATALOG_PREFIX, response_class=HTMLResponse)
@handle_http_errors
async def index(
    request: Request,
    book_repo: BookRepoDep,
    author_repo: AuthorRepoDep,
    genre_repo: GenreRepoDep,
) -> HTMLResponse:
    """Home page with record counts, fetched concurrently."""
    counts = await GetCatalogCountsCommand(
        book_repo, author_repo, genre_repo
    ).execute()
    return render(
        request,
        "index.html",
        {
            "title": "Local Library Home",
            "book_count": counts.book_count,
            "author_count": counts.author_count,
            "genre_count": counts.genre_count,
        },
    )
