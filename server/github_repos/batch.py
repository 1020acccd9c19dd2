import asyncio
import base64
import binascii
import logging
from typing import Any, Awaitable, Iterable, List, Union

from .api import GitHubAPI
from .decoder import SchemaParser
from .errors import ApiError, ErrorCode, log_and_return_error
from .types import FileContent, RepositoryRecord, Webhook


async def settle(awaitables: Iterable[Awaitable[Any]]) -> List[Union[Any, BaseException]]:
    """Run all awaitables concurrently; a failure is returned in place of its result."""
    return await asyncio.gather(*awaitables, return_exceptions=True)


class BatchFetcher:
    """Enriches repository records with per-repository REST data.

    Each phase issues one request per repository concurrently and waits for
    all of them. A failed request leaves its repository untouched.
    """

    def __init__(
        self,
        api: GitHubAPI,
        schema_parser: SchemaParser,
        logger: logging.Logger,
        authorization: str,
    ):
        self.api = api
        self.schema_parser = schema_parser
        self.logger = logger
        self.authorization = authorization

    def _decode_webhooks(self, data: Any) -> List[Webhook]:
        return self.schema_parser.decode(data, List[Webhook], self.logger)

    async def attach_webhooks(
        self,
        repositories: List[RepositoryRecord],
        *,
        strict: bool = False,
        active_only: bool = False,
    ) -> None:
        """Fetch webhooks of every repository.

        With `strict`, a response that arrives but cannot be decoded fails the
        whole request. Otherwise decoding is part of each request and a bad
        payload only leaves that repository without webhooks.
        """

        async def fetch(repository: RepositoryRecord) -> Any:
            data = await self.api.get_repository_webhooks(
                repository.owner.login, repository.name, self.authorization
            )
            if strict:
                return data
            return self._decode_webhooks(data)

        outcomes = await settle([fetch(repository) for repository in repositories])

        for repository, outcome in zip(repositories, outcomes):
            if isinstance(outcome, BaseException):
                self.logger.warning(
                    "Failed to fetch webhooks of %s/%s: %s",
                    repository.owner.login, repository.name, outcome,
                )
                continue

            if strict:
                try:
                    webhooks = self._decode_webhooks(outcome)
                except ApiError as e:
                    raise log_and_return_error(
                        self.logger,
                        ErrorCode.INTERNAL_API_ERROR,
                        "Failed to parse repository webhooks",
                        error=e,
                    ) from e
            else:
                webhooks = outcome

            if active_only:
                webhooks = [webhook for webhook in webhooks if webhook.active]

            repository.webhooks = webhooks

    async def attach_config_files(self, repositories: List[RepositoryRecord]) -> None:
        """Fetch and decode the config file of repositories that have one."""
        targets = [repository for repository in repositories if repository.config_file_path]

        async def fetch(repository: RepositoryRecord) -> FileContent:
            data = await self.api.get_repository_file(
                repository.owner.login,
                repository.name,
                repository.config_file_path,
                self.authorization,
            )
            return self.schema_parser.decode(data, FileContent, self.logger)

        outcomes = await settle([fetch(repository) for repository in targets])

        for repository, outcome in zip(targets, outcomes):
            if isinstance(outcome, BaseException):
                self.logger.warning(
                    "Failed to fetch %s of %s/%s: %s",
                    repository.config_file_path, repository.owner.login, repository.name, outcome,
                )
                continue

            try:
                repository.config_file_content = base64.b64decode(outcome.content).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError) as e:
                self.logger.warning(
                    "Failed to decode %s of %s/%s: %s",
                    repository.config_file_path, repository.owner.login, repository.name, e,
                )
