"""Entry points of the repositories queries."""

import functools
import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .api import GitHubAPI
from .batch import BatchFetcher
from .config import CONFIG_FILE_EXTENSION, MAX_REPOSITORIES_COUNT, MIN_REPOSITORIES_COUNT
from .decoder import SchemaParser
from .errors import ErrorCode, log_and_return_error
from .pagination import pull_repositories
from .tree import summarize_repository
from .types import (
    PageRequest,
    RepositoriesDetailsOutput,
    RepositoriesListOutput,
    RepositoryNode,
    RepositoryRecord,
    RepositorySummary,
)

BEARER_PREFIX = re.compile(r"^\s*bearer\s+", re.IGNORECASE)


@dataclass
class RepositoriesDeps:
    api: GitHubAPI
    logger: logging.Logger
    schema_parser: SchemaParser = field(default_factory=SchemaParser)
    config_file_extension: str = CONFIG_FILE_EXTENSION


def validate_count(count: int, logger: logging.Logger) -> None:
    if count < MIN_REPOSITORIES_COUNT or count > MAX_REPOSITORIES_COUNT:
        raise log_and_return_error(
            logger, ErrorCode.VALIDATION_ERROR, "Incorrect count has been provided"
        )


def normalize_token(token: str) -> str:
    """Strip a leading `Bearer ` (any case) from a caller supplied token."""
    return BEARER_PREFIX.sub("", token, count=1)


def authorization_header(token: str) -> str:
    return f"Bearer {token}"


def build_record(repository: RepositoryNode, extension: str) -> RepositoryRecord:
    summary = summarize_repository(repository, extension)
    return RepositoryRecord(
        name=repository.name,
        owner=repository.owner,
        is_private=repository.isPrivate,
        files_count=summary.files_count,
        config_file_path=summary.config_file_path,
    )


async def user_repositories_list(
    params: PageRequest, deps: RepositoriesDeps
) -> RepositoriesListOutput:
    """One upstream page of the viewer's repositories with their size."""
    validate_count(params.count, deps.logger)
    authorization = authorization_header(normalize_token(params.token))

    try:
        page = await deps.api.get_user_repositories_list(
            params.count, params.cursor, authorization
        )
    except Exception as e:
        raise log_and_return_error(
            deps.logger,
            ErrorCode.INTERNAL_API_ERROR,
            "Failed to pull user repositories",
            error=e,
        ) from e

    if page.nodes is None:
        return RepositoriesListOutput(repositories=[])

    return RepositoriesListOutput(
        repositories=[
            RepositorySummary(name=node.name, size=node.diskUsage or 0, owner=node.owner)
            for node in page.nodes
            if node is not None
        ],
        cursor=page.last_cursor(),
    )


async def _collect_repositories(
    params: PageRequest, deps: RepositoriesDeps
) -> Tuple[List[RepositoryRecord], Optional[str], BatchFetcher]:
    validate_count(params.count, deps.logger)
    authorization = authorization_header(normalize_token(params.token))

    fetch_page = functools.partial(
        deps.api.get_user_repositories_details, authorization=authorization
    )

    try:
        result = await pull_repositories(fetch_page, params.count, params.cursor)
    except Exception as e:
        raise log_and_return_error(
            deps.logger,
            ErrorCode.INTERNAL_API_ERROR,
            "Failed to pull user repositories",
            error=e,
        ) from e

    records = [
        build_record(repository, deps.config_file_extension)
        for repository in result.repositories
    ]
    fetcher = BatchFetcher(deps.api, deps.schema_parser, deps.logger, authorization)
    return records, result.cursor, fetcher


async def user_repositories_info(
    params: PageRequest, deps: RepositoriesDeps
) -> RepositoriesDetailsOutput:
    """Repositories with all their webhooks.

    A webhook payload that cannot be decoded fails the request.
    """
    records, cursor, fetcher = await _collect_repositories(params, deps)

    await fetcher.attach_webhooks(records, strict=True)
    await fetcher.attach_config_files(records)

    return RepositoriesDetailsOutput(repositories=records, cursor=cursor)


async def user_repositories_details(
    params: PageRequest, deps: RepositoriesDeps
) -> RepositoriesDetailsOutput:
    """Repositories with their active webhooks.

    Any webhook failure, decoding included, only empties that repository's list.
    """
    records, cursor, fetcher = await _collect_repositories(params, deps)

    await fetcher.attach_webhooks(records, active_only=True)
    await fetcher.attach_config_files(records)

    return RepositoriesDetailsOutput(repositories=records, cursor=cursor)
