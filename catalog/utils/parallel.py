"""Helper for running independent lookups concurrently."""

import asyncio
from collections.abc import Awaitable
from typing import Any


async def gather_named(**awaitables: Awaitable[Any]) -> dict[str, Any]:
    """
    Await independent awaitables concurrently and key results by name.

    Every lookup must be independent of the others; the results are only
    available once all of them have completed. The first failure is
    re-raised to the caller.

    Example:
        ```python
        results = await gather_named(
            genre=genre_repo.get_by_id(genre_id),
            genre_books=book_repo.get_by_genre(genre_id),
        )
        results["genre"], results["genre_books"]
        ```

    Args:
        **awaitables: Name to awaitable mapping.

    Returns:
        Name to result mapping, in the order the names were given.
    """
    names = list(awaitables)
    results = await asyncio.gather(*awaitables.values())
    return dict(zip(names, results))
