import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional

from .types import RepositoryNode, ViewerRepositories

logger = logging.getLogger(__name__)

FetchPage = Callable[[int, Optional[str]], Awaitable[ViewerRepositories]]


@dataclass
class PaginationResult:
    repositories: List[RepositoryNode] = field(default_factory=list)
    cursor: Optional[str] = None


def next_batch_size(count: int, fetched_count: int) -> int:
    return 1 if count - fetched_count == 1 else 2


async def pull_repositories(
    fetch_page: FetchPage, count: int, cursor: Optional[str] = None
) -> PaginationResult:
    """Collect up to `count` repositories by paging through the GraphQL API.

    Upstream is asked for at most two repositories at a time. Null nodes are
    dropped but still count against `count`. The returned cursor is the one
    of the last edge seen, or None once upstream has no more repositories.
    When upstream over-delivers, the list is truncated and the cursor moves
    back to the edge of the last repository kept.
    Errors from `fetch_page` propagate unchanged.
    """
    fetched_count = 0
    is_cursor_exhausted = False
    result = PaginationResult(cursor=cursor)
    kept_cursors: List[Optional[str]] = []

    while fetched_count < count and not is_cursor_exhausted:
        batch_size = next_batch_size(count, fetched_count)
        page = await fetch_page(batch_size, result.cursor)

        if not page.nodes:
            result.cursor = None
            is_cursor_exhausted = True
            break

        for index, node in enumerate(page.nodes):
            if node is not None:
                result.repositories.append(node)
                kept_cursors.append(page.cursor_at(index))

        result.cursor = page.last_cursor()
        if not result.cursor:
            logger.debug("Repositories page came without a cursor, stopping")
            is_cursor_exhausted = True
            break

        fetched_count += batch_size

    if len(result.repositories) > count:
        # Resume right after the last repository handed back
        del result.repositories[count:]
        result.cursor = kept_cursors[count - 1]
    return result
