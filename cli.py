"""
CLI tool for the catalog application.

Provides commands for viewing registered routes, creating the database
tables and loading a small demo data set.
"""

import asyncio
from datetime import date

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from starlette.routing import Route

from catalog import application
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.models.genre import Genre
from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.repositories.genre_repository import GenreRepository
from catalog.storage.db import async_session, engine, wait_and_init_db

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="catalog-cli",
    help="Local Library catalog management CLI",
    add_completion=False,
)
console = Console()

DEMO_GENRES = ["Fantasy", "Science Fiction", "French Poetry"]

DEMO_AUTHORS = [
    ("Patrick", "Rothfuss", date(1973, 6, 6), None),
    ("Ben", "Bova", date(1932, 11, 8), date(2020, 11, 29)),
    ("Isaac", "Asimov", date(1920, 1, 2), date(1992, 4, 6)),
]

# title, summary, isbn, author index, genre indexes
DEMO_BOOKS = [
    (
        "The Name of the Wind",
        "The first day of the Kingkiller Chronicle.",
        "9781473211896",
        0,
        [0],
    ),
    (
        "Apes and Angels",
        "Humankind's first interstellar mission.",
        "9780765379528",
        1,
        [1],
    ),
    (
        "The Gods Themselves",
        "An energy pump between parallel universes.",
        "9780553288100",
        2,
        [1],
    ),
]


@typer_app.command(name="routes")
def routes():
    """
    Display a table of all registered HTTP routes.

    Example:
        python cli.py routes
    """
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Registered Routes[/bold cyan]", border_style="cyan"
        )
    )
    console.print()

    table = Table("Methods", "Path", "Handler", show_lines=True)

    for route in application().routes:
        if not isinstance(route, Route):
            continue
        methods = ", ".join(sorted(route.methods or []))
        handler = f"{route.endpoint.__module__}.[yellow]{route.endpoint.__name__}[/yellow]"
        table.add_row(f"[green]{methods}[/green]", route.path, handler)

    console.print(table)
    console.print()


@typer_app.command(name="init-db")
def init_db():
    """
    Wait for the database and create any missing tables.

    Example:
        python cli.py init-db
    """

    async def _run() -> None:
        try:
            await wait_and_init_db()
        finally:
            await engine.dispose()

    try:
        asyncio.run(_run())
    except RuntimeError as ex:
        console.print(f"[red]✗[/red] {ex}")
        raise typer.Exit(code=1)

    console.print("[green]✓[/green] Database tables are ready")


async def _seed() -> tuple[int, int, int]:
    async with async_session() as session:
        genre_repo = GenreRepository(session)
        author_repo = AuthorRepository(session)
        book_repo = BookRepository(session)

        genres = []
        for name in DEMO_GENRES:
            genre = await genre_repo.get_by_name(name)
            genres.append(genre or await genre_repo.create(Genre(name=name)))

        authors = [
            await author_repo.create(
                Author(
                    first_name=first_name,
                    family_name=family_name,
                    date_of_birth=born,
                    date_of_death=died,
                )
            )
            for first_name, family_name, born, died in DEMO_AUTHORS
        ]

        for title, summary, isbn, author_idx, genre_idxs in DEMO_BOOKS:
            book = Book(
                title=title,
                summary=summary,
                isbn=isbn,
                author_id=authors[author_idx].id,
            )
            book.genres = [genres[idx] for idx in genre_idxs]
            await book_repo.create(book)

        await session.commit()

    return len(genres), len(authors), len(DEMO_BOOKS)


@typer_app.command(name="seed")
def seed():
    """
    Load a small demo data set (genres, authors and books).

    Genres are reused when one with the same name already exists.

    Example:
        python cli.py seed
    """

    async def _run() -> tuple[int, int, int]:
        try:
            await wait_and_init_db()
            return await _seed()
        finally:
            await engine.dispose()

    genres, authors, books = asyncio.run(_run())
    console.print(
        f"[green]✓[/green] Seeded {genres} genres, {authors} authors "
        f"and {books} books"
    )


if __name__ == "__main__":
    typer_app()
