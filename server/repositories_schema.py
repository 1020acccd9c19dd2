from typing import List, Optional

import strawberry
from strawberry.types import Info

from github_repos import types as models
from github_repos.resolvers import (
    RepositoriesDeps,
    user_repositories_details,
    user_repositories_info,
    user_repositories_list,
)


@strawberry.type(description="Webhook configuration")
class WebhookConfig:
    url: Optional[str] = strawberry.field(description="Webhook configuration url")
    content_type: Optional[str] = strawberry.field(
        name="content_type", description="Webhook configuration content type"
    )
    secret: Optional[str] = strawberry.field(description="Webhook configuration secret")
    insecure_ssl: Optional[str] = strawberry.field(
        name="insecure_ssl", description="Webhook insecure ssl"
    )


@strawberry.type(description="Last webhook response")
class LastWebhookResponse:
    code: Optional[int] = strawberry.field(description="Last webhook response status code")
    status: Optional[str] = strawberry.field(description="Last webhook response status")
    message: Optional[str] = strawberry.field(description="Last webhook response message")


@strawberry.type(description="Webhook")
class Webhook:
    id: int = strawberry.field(description="Webhook id")
    name: str = strawberry.field(description="Webhook name")
    active: bool = strawberry.field(description="Flag, which indicates if webhook is active")
    type: str = strawberry.field(description="Type of the webhook")
    events: List[str] = strawberry.field(description="Webhook events")
    config: WebhookConfig = strawberry.field(description="Webhook configuration")
    updated_at: str = strawberry.field(
        name="updated_at", description="Timestamp, which indicates when webhook was updated"
    )
    created_at: str = strawberry.field(
        name="created_at", description="Timestamp, which indicates when webhook was created"
    )
    url: str = strawberry.field(description="Webhook url")
    test_url: str = strawberry.field(name="test_url", description="Webhook test url")
    ping_url: str = strawberry.field(name="ping_url", description="Webhook ping url")
    deliveries_url: Optional[str] = strawberry.field(
        name="deliveries_url", description="Webhook deliveries url"
    )
    last_response: LastWebhookResponse = strawberry.field(
        name="last_response", description="Last webhook response"
    )

    @classmethod
    def from_model(cls, webhook: models.Webhook) -> "Webhook":
        return cls(
            **webhook.model_dump(exclude={"config", "last_response"}),
            config=WebhookConfig(**webhook.config.model_dump()),
            last_response=LastWebhookResponse(**webhook.last_response.model_dump()),
        )


@strawberry.type(description="Github repository owner")
class GithubRepositoryOwner:
    login: str = strawberry.field(description="Login of the github repository owner")
    id: strawberry.ID = strawberry.field(description="Identifier of the github repository owner")

    @classmethod
    def from_model(cls, owner: models.RepositoryOwner) -> "GithubRepositoryOwner":
        return cls(login=owner.login, id=strawberry.ID(owner.id))


@strawberry.type(description="Github repository")
class GithubRepository:
    name: str = strawberry.field(description="Repository name")
    size: int = strawberry.field(description="Repository disk usage in kilobytes")
    owner: GithubRepositoryOwner = strawberry.field(description="Repository owner")


@strawberry.type(description="Github repository details")
class GithubRepositoryInfo:
    name: str = strawberry.field(description="Repository name")
    is_private: bool = strawberry.field(
        description="Flag, which indicates if the repository is private"
    )
    owner: GithubRepositoryOwner = strawberry.field(description="Repository owner")
    webhooks: List[Webhook] = strawberry.field(description="Repository webhooks")
    config_file_content: Optional[str] = strawberry.field(
        description="Content of the repository config file, shown only if exists"
    )
    files_count: int = strawberry.field(description="Count of existing files in the repository")

    @classmethod
    def from_model(cls, repository: models.RepositoryRecord) -> "GithubRepositoryInfo":
        return cls(
            name=repository.name,
            is_private=repository.is_private,
            owner=GithubRepositoryOwner.from_model(repository.owner),
            webhooks=[Webhook.from_model(webhook) for webhook in repository.webhooks],
            config_file_content=repository.config_file_content,
            files_count=repository.files_count,
        )


@strawberry.type(description="User repositories list output")
class UserRepositoriesListOutput:
    repositories: List[GithubRepository] = strawberry.field(description="User repositories list")
    cursor: Optional[str] = strawberry.field(
        description="Cursor to paginate through user repositories list"
    )


@strawberry.type(description="User repositories details output")
class UserRepositoriesDetailsOutput:
    repositories: List[GithubRepositoryInfo] = strawberry.field(
        description="User repositories details"
    )
    cursor: Optional[str] = strawberry.field(description="Cursor of the last item")

    @classmethod
    def from_model(cls, output: models.RepositoriesDetailsOutput) -> "UserRepositoriesDetailsOutput":
        return cls(
            repositories=[GithubRepositoryInfo.from_model(repository) for repository in output.repositories],
            cursor=output.cursor,
        )


@strawberry.input(description="User repositories query parameters")
class UserRepositoriesInput:
    token: str = strawberry.field(description="Token of github user to fetch repositories")
    count: int = strawberry.field(description="Max number of user repositories to fetch")
    cursor: Optional[str] = strawberry.field(
        default=None, description="Cursor to paginate through user repositories"
    )

    def to_page_request(self) -> models.PageRequest:
        return models.PageRequest(token=self.token, count=self.count, cursor=self.cursor)


def get_deps(info: Info) -> RepositoriesDeps:
    return info.context["deps"]


@strawberry.type
class Query:
    @strawberry.field(description="Fetches user repositories list")
    async def user_repositories_list(
        self, info: Info, params: UserRepositoriesInput
    ) -> UserRepositoriesListOutput:
        output = await user_repositories_list(params.to_page_request(), get_deps(info))
        return UserRepositoriesListOutput(
            repositories=[
                GithubRepository(
                    name=repository.name,
                    size=repository.size,
                    owner=GithubRepositoryOwner.from_model(repository.owner),
                )
                for repository in output.repositories
            ],
            cursor=output.cursor,
        )

    @strawberry.field(description="Fetches user repositories with all their webhooks")
    async def user_repositories_info(
        self, info: Info, params: UserRepositoriesInput
    ) -> UserRepositoriesDetailsOutput:
        output = await user_repositories_info(params.to_page_request(), get_deps(info))
        return UserRepositoriesDetailsOutput.from_model(output)

    @strawberry.field(description="Fetches user repositories with their active webhooks")
    async def user_repositories_details(
        self, info: Info, params: UserRepositoriesInput
    ) -> UserRepositoriesDetailsOutput:
        output = await user_repositories_details(params.to_page_request(), get_deps(info))
        return UserRepositoriesDetailsOutput.from_model(output)


schema = strawberry.Schema(query=Query)
