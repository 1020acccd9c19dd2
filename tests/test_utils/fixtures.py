from unittest.mock import AsyncMock

import pytest

from github_repos import GitHubAPI, RepositoriesDeps, SchemaParser, create_logger


@pytest.fixture
def logger_fixture():
    return create_logger("DEBUG")


@pytest.fixture
def api_fixture():
    return AsyncMock(spec=GitHubAPI)


@pytest.fixture
def deps_fixture(api_fixture, logger_fixture):
    return RepositoriesDeps(
        api=api_fixture,
        logger=logger_fixture,
        schema_parser=SchemaParser(),
        config_file_extension=".yml",
    )
