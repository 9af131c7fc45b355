"""Book list and detail pages."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from catalog.commands.book_commands import GetBookDetailCommand, GetBooksCommand
from catalog.constants import CATALOG_PREFIX
from catalog.dependencies import BookRepoDep
from catalog.utils.error_handler import handle_http_errors
from catalog.utils.templating import render

router = APIRouter(prefix=CATALOG_PREFIX, tags=["books"])


@router.get("/books", response_class=HTMLResponse, summary="List books")
@handle_http_errors
async def book_list(request: Request, repo: BookRepoDep) -> HTMLResponse:
    books = await GetBooksCommand(repo).execute()
    return render(
        request, "book_list.html", {"title": "Book List", "book_list": books}
    )


@router.get("/book/{book_id:int}", response_class=HTMLResponse)
@handle_http_errors
async def book_detail(
    request: Request, book_id: int, repo: BookRepoDep
) -> HTMLResponse:
    book = await GetBookDetailCommand(repo).execute(book_id)
    return render(request, "book_detail.html", {"title": book.title, "book": book})
