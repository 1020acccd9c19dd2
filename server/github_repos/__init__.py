"""Aggregated view of a GitHub user's repositories."""

from .api import GitHubAPI
from .batch import BatchFetcher, settle
from .decoder import SchemaParser
from .errors import ApiError, ErrorCode, GitHubAPIError, log_and_return_error
from .logger import create_logger
from .pagination import PaginationResult, pull_repositories
from .resolvers import (
    RepositoriesDeps,
    normalize_token,
    user_repositories_details,
    user_repositories_info,
    user_repositories_list,
    validate_count,
)
from .tree import summarize_commit, summarize_repository, summarize_tree
from .types import (
    FileContent, GitCommit, GitObject, GitTree, GitTreeEntry,
    GraphQLQuery, GraphQLResponse, PageRequest, RepositoriesDetailsOutput,
    RepositoriesListOutput, RepositoryNode, RepositoryRecord, RepositorySummary,
    ViewerRepositories, Webhook
)

__all__ = [
    # API classes
    'GitHubAPI',
    'GitHubAPIError',
    'BatchFetcher',
    'SchemaParser',

    # Errors and logging
    'ApiError',
    'ErrorCode',
    'log_and_return_error',
    'create_logger',

    # Type definitions
    'FileContent',
    'GitCommit',
    'GitObject',
    'GitTree',
    'GitTreeEntry',
    'GraphQLQuery',
    'GraphQLResponse',
    'PageRequest',
    'RepositoriesDetailsOutput',
    'RepositoriesListOutput',
    'RepositoryNode',
    'RepositoryRecord',
    'RepositorySummary',
    'ViewerRepositories',
    'Webhook',

    # Core functions
    'settle',
    'PaginationResult',
    'pull_repositories',
    'summarize_commit',
    'summarize_repository',
    'summarize_tree',

    # Query entry points
    'RepositoriesDeps',
    'normalize_token',
    'validate_count',
    'user_repositories_details',
    'user_repositories_info',
    'user_repositories_list',
]
