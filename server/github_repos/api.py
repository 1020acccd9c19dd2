import httpx
from typing import Any, Dict, Optional
from urllib.parse import quote

from pydantic import ValidationError

from .errors import GitHubAPIError
from .types import GraphQLQuery, GraphQLResponse, ViewerRepositories


class GitHubAPI:
    """Client for the GitHub GraphQL and REST APIs.

    The token belongs to the caller of the gateway, so every method takes the
    `Authorization` header value instead of keeping one on the client.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        graphql_url: str = "https://api.github.com/graphql",
        api_url: str = "https://api.github.com",
        max_depth: int = 8,
    ):
        self.client = client
        self.graphql_url = graphql_url
        self.api_url = api_url.rstrip('/')
        # Maximum depth for recursive tree queries
        self.max_depth = max_depth

    def _headers(self, authorization: str) -> Dict[str, str]:
        return {
            'Authorization': authorization,
            'Content-Type': 'application/json',
        }

    def _build_recursive_tree_query(self, depth: int = 0) -> str:
        """Build a recursive GraphQL selection for the tree entries."""
        if depth >= self.max_depth:
            return """
                path
                name
                extension
                type
            """

        return f"""
            path
            name
            extension
            type
            object {{
                __typename
                ... on Tree {{
                    __typename
                    entries {{
                        {self._build_recursive_tree_query(depth + 1)}
                    }}
                }}
            }}
        """

    async def _graphql_request(self, query: GraphQLQuery, authorization: str) -> Dict[str, Any]:
        """Make a GraphQL request to GitHub API."""
        try:
            response = await self.client.post(
                self.graphql_url,
                headers=self._headers(authorization),
                json=query.model_dump()
            )
            response.raise_for_status()
            result = GraphQLResponse(**response.json())

            if result.errors:
                raise GitHubAPIError(f"GraphQL errors: {result.errors}")

            if not result.data:
                raise GitHubAPIError("No data returned from GitHub API")

            return result.data

        except (httpx.HTTPError, ValueError, TypeError) as e:
            raise GitHubAPIError(f"GraphQL request failed: {str(e)}")

    async def _rest_request(self, url: str, authorization: str) -> Any:
        """Make a GET request to the REST API and return the decoded JSON body."""
        try:
            response = await self.client.get(
                url,
                headers={
                    'Authorization': authorization,
                    'Accept': 'application/vnd.github+json',
                }
            )
            response.raise_for_status()
            return response.json()

        except (httpx.HTTPError, ValueError) as e:
            raise GitHubAPIError(f"REST request failed: {str(e)}")

    def _viewer_repositories(self, data: Dict[str, Any]) -> ViewerRepositories:
        try:
            return ViewerRepositories.model_validate(data["viewer"]["repositories"])
        except (KeyError, TypeError, ValidationError) as e:
            raise GitHubAPIError(f"Unexpected repositories payload: {str(e)}")

    async def get_user_repositories_list(
        self, count: int, cursor: Optional[str], authorization: str
    ) -> ViewerRepositories:
        """Get one page of the viewer's repositories with their disk usage."""
        query = GraphQLQuery(
            query="""
            query UserRepositoriesList($count: Int!, $cursor: String) {
                viewer {
                    repositories(first: $count, after: $cursor) {
                        nodes {
                            name
                            owner {
                                login
                                id
                            }
                            diskUsage
                        }
                        edges {
                            cursor
                        }
                    }
                }
            }
            """,
            variables={"count": count, "cursor": cursor}
        )

        data = await self._graphql_request(query, authorization)
        return self._viewer_repositories(data)

    async def get_user_repositories_details(
        self, count: int, cursor: Optional[str], authorization: str
    ) -> ViewerRepositories:
        """Get one page of the viewer's repositories with their default-branch tree."""
        query = GraphQLQuery(
            query=f"""
            query UserRepositoriesDetails($count: Int!, $cursor: String) {{
                viewer {{
                    repositories(first: $count, after: $cursor) {{
                        nodes {{
                            name
                            owner {{
                                login
                                id
                            }}
                            isPrivate
                            defaultBranchRef {{
                                target {{
                                    __typename
                                    ... on Commit {{
                                        __typename
                                        tree {{
                                            entries {{
                                                {self._build_recursive_tree_query()}
                                            }}
                                        }}
                                    }}
                                }}
                            }}
                        }}
                        edges {{
                            cursor
                        }}
                    }}
                }}
            }}
            """,
            variables={"count": count, "cursor": cursor}
        )

        data = await self._graphql_request(query, authorization)
        return self._viewer_repositories(data)

    async def get_repository_webhooks(self, owner: str, name: str, authorization: str) -> Any:
        """Get the raw webhook list of a repository."""
        return await self._rest_request(
            f"{self.api_url}/repos/{owner}/{name}/hooks", authorization
        )

    async def get_repository_file(self, owner: str, name: str, path: str, authorization: str) -> Any:
        """Get the raw contents API payload of a repository file."""
        return await self._rest_request(
            f"{self.api_url}/repos/{owner}/{name}/contents/{quote(path, safe='/')}", authorization
        )
