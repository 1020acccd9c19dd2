import pytest

from github_repos.errors import ApiError, ErrorCode, GitHubAPIError
from github_repos.resolvers import (
    normalize_token,
    user_repositories_details,
    user_repositories_info,
    user_repositories_list,
)
from github_repos.types import PageRequest, ViewerRepositories
from tests.test_utils.fixtures import api_fixture, deps_fixture, logger_fixture  # noqa: F401
from tests.test_utils.util import (
    BEARER_TOKEN,
    CONFIG_FILE_CONTENT,
    CONFIG_FILE_PATH,
    OWNER_ID,
    OWNER_LOGIN,
    TOKEN,
    make_file_content,
    make_page,
    make_repository_node,
    make_webhook,
)

REPOSITORY_NAME = "repository_name"


def page(nodes, cursors=None):
    return ViewerRepositories.model_validate(make_page(nodes, cursors))


def details_node():
    return make_repository_node(
        REPOSITORY_NAME,
        entries=[{"type": "blob", "extension": ".yml", "path": CONFIG_FILE_PATH}],
    )


@pytest.fixture
def rest_fixture(api_fixture):  # noqa: F811
    api_fixture.get_repository_webhooks.return_value = [make_webhook()]
    api_fixture.get_repository_file.return_value = make_file_content(OWNER_LOGIN, REPOSITORY_NAME)
    return api_fixture


@pytest.mark.parametrize(
    "token,expected",
    [
        ("Bearer abc", "abc"),
        ("bearer abc", "abc"),
        ("BEARER   abc", "abc"),
        ("abc", "abc"),
        ("abc bearer def", "abc bearer def"),
    ],
)
def test_normalize_token(token, expected):
    assert normalize_token(token) == expected


@pytest.mark.asyncio
@pytest.mark.parametrize("resolver", [user_repositories_list, user_repositories_info, user_repositories_details])
@pytest.mark.parametrize("count", [0, -1, 21, 30])
async def test_invalid_count_is_rejected_before_any_call(resolver, count, deps_fixture, api_fixture):  # noqa: F811
    with pytest.raises(ApiError) as exc_info:
        await resolver(PageRequest(token=BEARER_TOKEN, count=count), deps_fixture)

    assert exc_info.value.code == ErrorCode.VALIDATION_ERROR
    assert exc_info.value.extensions == {"code": "VALIDATION_ERROR"}
    assert api_fixture.mock_calls == []


@pytest.mark.asyncio
async def test_list_passes_params_and_token(deps_fixture, api_fixture):  # noqa: F811
    api_fixture.get_user_repositories_list.return_value = page([])

    await user_repositories_list(PageRequest(token=BEARER_TOKEN, count=1, cursor="cursor"), deps_fixture)

    api_fixture.get_user_repositories_list.assert_awaited_once_with(1, "cursor", f"Bearer {TOKEN}")


@pytest.mark.asyncio
async def test_list_returns_repositories_skipping_nulls(deps_fixture, api_fixture):  # noqa: F811
    api_fixture.get_user_repositories_list.return_value = page(
        [make_repository_node("Repository name", disk_usage=124), None, None],
        ["first-cursor", "second-cursor", "cursor"],
    )

    output = await user_repositories_list(PageRequest(token=BEARER_TOKEN, count=1), deps_fixture)

    assert output.cursor == "cursor"
    assert [(r.name, r.size, r.owner.login, r.owner.id) for r in output.repositories] == [
        ("Repository name", 124, OWNER_LOGIN, OWNER_ID)
    ]


@pytest.mark.asyncio
async def test_list_without_nodes(deps_fixture, api_fixture):  # noqa: F811
    api_fixture.get_user_repositories_list.return_value = ViewerRepositories()

    output = await user_repositories_list(PageRequest(token=BEARER_TOKEN, count=5), deps_fixture)

    assert output.repositories == []
    assert output.cursor is None


@pytest.mark.asyncio
async def test_list_missing_disk_usage_is_zero(deps_fixture, api_fixture):  # noqa: F811
    api_fixture.get_user_repositories_list.return_value = page([make_repository_node("repo")], ["c"])

    output = await user_repositories_list(PageRequest(token=BEARER_TOKEN, count=1), deps_fixture)

    assert output.repositories[0].size == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("resolver,method", [
    (user_repositories_list, "get_user_repositories_list"),
    (user_repositories_info, "get_user_repositories_details"),
    (user_repositories_details, "get_user_repositories_details"),
])
async def test_upstream_failure_is_internal_api_error(resolver, method, deps_fixture, api_fixture):  # noqa: F811
    getattr(api_fixture, method).side_effect = GitHubAPIError("Github API Error")

    with pytest.raises(ApiError) as exc_info:
        await resolver(PageRequest(token=BEARER_TOKEN, count=10), deps_fixture)

    assert exc_info.value.code == ErrorCode.INTERNAL_API_ERROR
    assert "Failed to pull user repositories" in exc_info.value.message


@pytest.mark.asyncio
async def test_details_passes_params_and_token(deps_fixture, api_fixture):  # noqa: F811
    api_fixture.get_user_repositories_details.return_value = page([])

    output = await user_repositories_details(
        PageRequest(token=BEARER_TOKEN, count=1, cursor="cursor"), deps_fixture
    )

    api_fixture.get_user_repositories_details.assert_awaited_once_with(
        1, "cursor", authorization=f"Bearer {TOKEN}"
    )
    assert output.repositories == []
    assert output.cursor is None


@pytest.mark.asyncio
async def test_details_returns_enriched_repository(deps_fixture, rest_fixture):  # noqa: F811
    rest_fixture.get_user_repositories_details.return_value = page([details_node()], ["cursor"])

    output = await user_repositories_details(PageRequest(token=BEARER_TOKEN, count=1), deps_fixture)

    assert output.cursor == "cursor"
    [repository] = output.repositories
    assert repository.name == REPOSITORY_NAME
    assert repository.is_private is True
    assert repository.files_count == 1
    assert repository.owner.login == OWNER_LOGIN
    assert repository.config_file_content == CONFIG_FILE_CONTENT
    assert [webhook.id for webhook in repository.webhooks] == [1]
    rest_fixture.get_repository_file.assert_awaited_once_with(
        OWNER_LOGIN, REPOSITORY_NAME, CONFIG_FILE_PATH, f"Bearer {TOKEN}"
    )


@pytest.mark.asyncio
async def test_details_skips_null_repositories(deps_fixture, rest_fixture):  # noqa: F811
    rest_fixture.get_user_repositories_details.return_value = page(
        [details_node(), None, None], ["cursor"]
    )

    output = await user_repositories_details(PageRequest(token=BEARER_TOKEN, count=1), deps_fixture)

    assert [repository.name for repository in output.repositories] == [REPOSITORY_NAME]
    assert output.cursor == "cursor"


@pytest.mark.asyncio
async def test_details_drops_inactive_webhooks(deps_fixture, rest_fixture):  # noqa: F811
    rest_fixture.get_user_repositories_details.return_value = page([details_node()], ["cursor"])
    rest_fixture.get_repository_webhooks.return_value = [
        make_webhook(id=1, active=False),
        make_webhook(id=2, active=True),
    ]

    output = await user_repositories_details(PageRequest(token=BEARER_TOKEN, count=1), deps_fixture)

    assert [webhook.id for webhook in output.repositories[0].webhooks] == [2]


@pytest.mark.asyncio
async def test_details_survives_webhook_failure(deps_fixture, rest_fixture):  # noqa: F811
    rest_fixture.get_user_repositories_details.return_value = page(
        [details_node(), make_repository_node("other", entries=[])], ["c1", "c2"]
    )

    async def get_webhooks(owner, name, authorization):
        if name == REPOSITORY_NAME:
            raise GitHubAPIError("REST request failed")
        return [make_webhook(id=7)]

    rest_fixture.get_repository_webhooks.side_effect = get_webhooks

    output = await user_repositories_details(PageRequest(token=BEARER_TOKEN, count=2), deps_fixture)

    assert output.repositories[0].webhooks == []
    assert [webhook.id for webhook in output.repositories[1].webhooks] == [7]


@pytest.mark.asyncio
async def test_details_survives_malformed_webhooks(deps_fixture, rest_fixture):  # noqa: F811
    rest_fixture.get_user_repositories_details.return_value = page([details_node()], ["cursor"])
    rest_fixture.get_repository_webhooks.return_value = [{"id": 1}]

    output = await user_repositories_details(PageRequest(token=BEARER_TOKEN, count=1), deps_fixture)

    assert output.repositories[0].webhooks == []


@pytest.mark.asyncio
async def test_info_keeps_inactive_webhooks(deps_fixture, rest_fixture):  # noqa: F811
    rest_fixture.get_user_repositories_details.return_value = page([details_node()], ["cursor"])
    rest_fixture.get_repository_webhooks.return_value = [
        make_webhook(id=1, active=False),
        make_webhook(id=2, active=True),
    ]

    output = await user_repositories_info(PageRequest(token=BEARER_TOKEN, count=1), deps_fixture)

    assert [webhook.id for webhook in output.repositories[0].webhooks] == [1, 2]
    assert output.repositories[0].config_file_content == CONFIG_FILE_CONTENT


@pytest.mark.asyncio
async def test_info_fails_on_malformed_webhooks(deps_fixture, rest_fixture):  # noqa: F811
    rest_fixture.get_user_repositories_details.return_value = page([details_node()], ["cursor"])
    rest_fixture.get_repository_webhooks.return_value = [{"id": 1}]

    with pytest.raises(ApiError) as exc_info:
        await user_repositories_info(PageRequest(token=BEARER_TOKEN, count=1), deps_fixture)

    assert exc_info.value.code == ErrorCode.INTERNAL_API_ERROR
    assert exc_info.value.message == "Failed to parse repository webhooks"


@pytest.mark.asyncio
async def test_info_survives_webhook_failure(deps_fixture, rest_fixture):  # noqa: F811
    rest_fixture.get_user_repositories_details.return_value = page([details_node()], ["cursor"])
    rest_fixture.get_repository_webhooks.side_effect = GitHubAPIError("REST request failed")

    output = await user_repositories_info(PageRequest(token=BEARER_TOKEN, count=1), deps_fixture)

    assert output.repositories[0].webhooks == []
