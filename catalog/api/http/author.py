"""
Author pages: list, detail, create, update and delete.

Same flow as the genre pages. Deleting an author is refused while any
book still references them.
"""

from typing import Annotated

from fastapi import APIRouter, Form, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse

from catalog.commands.author_commands import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    GetAuthorCommand,
    GetAuthorDetailCommand,
    GetAuthorsCommand,
    UpdateAuthorCommand,
    UpdateAuthorInput,
)
from catalog.constants import AUTHOR_LIST_URL, CATALOG_PREFIX
from catalog.dependencies import AuthorRepoDep, BookRepoDep
from catalog.exceptions import NotFoundError
from catalog.models.author import Author
from catalog.schemas.forms import (
    AuthorForm,
    parse_date_or_none,
    sanitize,
    validate_form,
)
from catalog.utils.error_handler import handle_http_errors
from catalog.utils.templating import render

router = APIRouter(prefix=CATALOG_PREFIX, tags=["authors"])


def _draft_author(
    author_id: int | None,
    first_name: str,
    family_name: str,
    date_of_birth: str,
    date_of_death: str,
) -> Author:
    """Sanitized, unsaved author used to refill a rejected form."""
    return Author(
        id=author_id,
        first_name=sanitize(first_name),
        family_name=sanitize(family_name),
        date_of_birth=parse_date_or_none(date_of_birth),
        date_of_death=parse_date_or_none(date_of_death),
    )


@router.get("/authors", response_class=HTMLResponse, summary="List authors")
@handle_http_errors
async def author_list(request: Request, repo: AuthorRepoDep) -> HTMLResponse:
    authors = await GetAuthorsCommand(repo).execute()
    return render(
        request,
        "author_list.html",
        {"title": "Author List", "author_list": authors},
    )


@router.get("/author/create", response_class=HTMLResponse)
async def author_create_get(request: Request) -> HTMLResponse:
    return render(request, "author_form.html", {"title": "Create Author"})


@router.post("/author/create", response_class=HTMLResponse)
@handle_http_errors
async def author_create_post(
    request: Request,
    repo: AuthorRepoDep,
    first_name: Annotated[str, Form()] = "",
    family_name: Annotated[str, Form()] = "",
    date_of_birth: Annotated[str, Form()] = "",
    date_of_death: Annotated[str, Form()] = "",
) -> Response:
    form, errors = validate_form(
        AuthorForm,
        {
            "first_name": first_name,
            "family_name": family_name,
            "date_of_birth": date_of_birth,
            "date_of_death": date_of_death,
        },
    )
    if errors:
        return render(
            request,
            "author_form.html",
            {
                "title": "Create Author",
                "author": _draft_author(
                    None, first_name, family_name, date_of_birth, date_of_death
                ),
                "errors": errors,
            },
        )

    author = await CreateAuthorCommand(repo).execute(form)
    return RedirectResponse(author.url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/author/{author_id:int}", response_class=HTMLResponse)
@handle_http_errors
async def author_detail(
    request: Request,
    author_id: int,
    author_repo: AuthorRepoDep,
    book_repo: BookRepoDep,
) -> HTMLResponse:
    detail = await GetAuthorDetailCommand(author_repo, book_repo).execute(
        author_id
    )
    return render(
        request,
        "author_detail.html",
        {
            "title": "Author Detail",
            "author": detail.author,
            "author_books": detail.author_books,
        },
    )


@router.get("/author/{author_id:int}/update", response_class=HTMLResponse)
@handle_http_errors
async def author_update_get(
    request: Request, author_id: int, repo: AuthorRepoDep
) -> HTMLResponse:
    author = await GetAuthorCommand(repo).execute(author_id)
    return render(
        request,
        "author_form.html",
        {"title": "Update Author", "author": author},
    )


@router.post("/author/{author_id:int}/update", response_class=HTMLResponse)
@handle_http_errors
async def author_update_post(
    request: Request,
    author_id: int,
    repo: AuthorRepoDep,
    first_name: Annotated[str, Form()] = "",
    family_name: Annotated[str, Form()] = "",
    date_of_birth: Annotated[str, Form()] = "",
    date_of_death: Annotated[str, Form()] = "",
) -> Response:
    form, errors = validate_form(
        AuthorForm,
        {
            "first_name": first_name,
            "family_name": family_name,
            "date_of_birth": date_of_birth,
            "date_of_death": date_of_death,
        },
    )
    if errors:
        return render(
            request,
            "author_form.html",
            {
                "title": "Update Author",
                "author": _draft_author(
                    author_id,
                    first_name,
                    family_name,
                    date_of_birth,
                    date_of_death,
                ),
                "errors": errors,
            },
        )

    author = await UpdateAuthorCommand(repo).execute(
        UpdateAuthorInput(id=author_id, form=form)
    )
    return RedirectResponse(author.url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/author/{author_id:int}/delete", response_class=HTMLResponse)
@handle_http_errors
async def author_delete_get(
    request: Request,
    author_id: int,
    author_repo: AuthorRepoDep,
    book_repo: BookRepoDep,
) -> Response:
    try:
        detail = await GetAuthorDetailCommand(author_repo, book_repo).execute(
            author_id
        )
    except NotFoundError:
        return RedirectResponse(
            AUTHOR_LIST_URL, status_code=status.HTTP_303_SEE_OTHER
        )

    return render(
        request,
        "author_delete.html",
        {
            "title": "Delete Author",
            "author": detail.author,
            "author_books": detail.author_books,
        },
    )


@router.post("/author/{author_id:int}/delete", response_class=HTMLResponse)
@handle_http_errors
async def author_delete_post(
    request: Request,
    author_id: int,
    author_repo: AuthorRepoDep,
    book_repo: BookRepoDep,
) -> Response:
    try:
        result = await DeleteAuthorCommand(author_repo, book_repo).execute(
            author_id
        )
    except NotFoundError:
        return RedirectResponse(
            AUTHOR_LIST_URL, status_code=status.HTTP_303_SEE_OTHER
        )

    if not result.deleted:
        return render(
            request,
            "author_delete.html",
            {
                "title": "Delete Author",
                "author": result.author,
                "author_books": result.author_books,
            },
        )

    return RedirectResponse(AUTHOR_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)
