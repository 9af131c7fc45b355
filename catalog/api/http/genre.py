"""
Genre pages: list, detail, create, update and delete.

GET routes render a template; POST routes either re-render their form
with validation errors or redirect (303) to the resulting page. Missing
genres go through the shared error page as 404, except on the delete
routes which fall back to the genre list.
"""

from typing import Annotated

from fastapi import APIRouter, Form, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse

from catalog.commands.genre_commands import (
    CreateGenreCommand,
    DeleteGenreCommand,
    GetGenreCommand,
    GetGenreDetailCommand,
    GetGenresCommand,
    UpdateGenreCommand,
    UpdateGenreInput,
)
from catalog.constants import CATALOG_PREFIX, GENRE_LIST_URL
from catalog.dependencies import BookRepoDep, GenreRepoDep
from catalog.exceptions import NotFoundError
from catalog.models.genre import Genre
from catalog.schemas.forms import GenreForm, sanitize, validate_form
from catalog.utils.error_handler import handle_http_errors
from catalog.utils.templating import render

router = APIRouter(prefix=CATALOG_PREFIX, tags=["genres"])


@router.get("/genres", response_class=HTMLResponse, summary="List genres")
@handle_http_errors
async def genre_list(request: Request, repo: GenreRepoDep) -> HTMLResponse:
    genres = await GetGenresCommand(repo).execute()
    return render(
        request,
        "genre_list.html",
        {"title": "Genre List", "genre_list": genres},
    )


@router.get("/genre/create", response_class=HTMLResponse)
async def genre_create_get(request: Request) -> HTMLResponse:
    return render(request, "genre_form.html", {"title": "Create Genre"})


@router.post("/genre/create", response_class=HTMLResponse)
@handle_http_errors
async def genre_create_post(
    request: Request,
    repo: GenreRepoDep,
    name: Annotated[str, Form()] = "",
) -> Response:
    """
    Handle the genre create form.

    A name that already exists redirects to the existing genre instead of
    inserting a duplicate.
    """
    form, errors = validate_form(GenreForm, {"name": name})
    if errors:
        return render(
            request,
            "genre_form.html",
            {
                "title": "Create Genre",
                "genre": Genre(name=sanitize(name)),
                "errors": errors,
            },
        )

    result = await CreateGenreCommand(repo).execute(form)
    return RedirectResponse(
        result.genre.url, status_code=status.HTTP_303_SEE_OTHER
    )


@router.get("/genre/{genre_id:int}", response_class=HTMLResponse)
@handle_http_errors
async def genre_detail(
    request: Request,
    genre_id: int,
    genre_repo: GenreRepoDep,
    book_repo: BookRepoDep,
) -> HTMLResponse:
    detail = await GetGenreDetailCommand(genre_repo, book_repo).execute(
        genre_id
    )
    return render(
        request,
        "genre_detail.html",
        {
            "title": "Genre Detail",
            "genre": detail.genre,
            "genre_books": detail.genre_books,
        },
    )


@router.get("/genre/{genre_id:int}/update", response_class=HTMLResponse)
@handle_http_errors
async def genre_update_get(
    request: Request, genre_id: int, repo: GenreRepoDep
) -> HTMLResponse:
    genre = await GetGenreCommand(repo).execute(genre_id)
    return render(
        request, "genre_form.html", {"title": "Update Genre", "genre": genre}
    )


@router.post("/genre/{genre_id:int}/update", response_class=HTMLResponse)
@handle_http_errors
async def genre_update_post(
    request: Request,
    genre_id: int,
    repo: GenreRepoDep,
    name: Annotated[str, Form()] = "",
) -> Response:
    form, errors = validate_form(GenreForm, {"name": name})
    if errors:
        return render(
            request,
            "genre_form.html",
            {
                "title": "Update Genre",
                "genre": Genre(id=genre_id, name=sanitize(name)),
                "errors": errors,
            },
        )

    genre = await UpdateGenreCommand(repo).execute(
        UpdateGenreInput(id=genre_id, form=form)
    )
    return RedirectResponse(genre.url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/genre/{genre_id:int}/delete", response_class=HTMLResponse)
@handle_http_errors
async def genre_delete_get(
    request: Request,
    genre_id: int,
    genre_repo: GenreRepoDep,
    book_repo: BookRepoDep,
) -> Response:
    try:
        detail = await GetGenreDetailCommand(genre_repo, book_repo).execute(
            genre_id
        )
    except NotFoundError:
        return RedirectResponse(
            GENRE_LIST_URL, status_code=status.HTTP_303_SEE_OTHER
        )

    return render(
        request,
        "genre_delete.html",
        {
            "title": "Delete Genre",
            "genre": detail.genre,
            "genre_books": detail.genre_books,
        },
    )


@router.post("/genre/{genre_id:int}/delete", response_class=HTMLResponse)
@handle_http_errors
async def genre_delete_post(
    request: Request,
    genre_id: int,
    genre_repo: GenreRepoDep,
    book_repo: BookRepoDep,
) -> Response:
    """
    Delete a genre unless books still reference it.

    When books do, the confirmation page is shown again listing them.
    """
    try:
        result = await DeleteGenreCommand(genre_repo, book_repo).execute(
            genre_id
        )
    except NotFoundError:
        return RedirectResponse(
            GENRE_LIST_URL, status_code=status.HTTP_303_SEE_OTHER
        )

    if not result.deleted:
        return render(
            request,
            "genre_delete.html",
            {
                "title": "Delete Genre",
                "genre": result.genre,
                "genre_books": result.genre_books,
            },
        )

    return RedirectResponse(GENRE_LIST_URL, status_code=status.HTTP_303_SEE_OTHER)
