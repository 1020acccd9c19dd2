from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Literal, Dict, Any, Union


class GraphQLQuery(BaseModel):
    """GraphQL query and variables."""
    query: str
    variables: Dict[str, Any]


class GraphQLResponse(BaseModel):
    """GraphQL response with data and errors."""
    data: Optional[Dict[str, Any]] = None
    errors: Optional[List[Dict[str, Any]]] = None


class RepositoryOwner(BaseModel):
    """Owner of a GitHub repository."""
    login: str
    id: str


class GitObject(BaseModel):
    """A git object the tree walker never descends into.

    Covers blobs, submodule commits and empty selections, i.e. every member
    of the GraphQL `GitObject` union other than `Tree`.
    """
    model_config = ConfigDict(populate_by_name=True)

    typename: Optional[str] = Field(default=None, alias="__typename")


class GitTreeEntry(BaseModel):
    """A file or directory of a git tree."""
    path: Optional[str] = None
    name: Optional[str] = None
    extension: Optional[str] = None
    type: Optional[str] = None
    object: Optional[Union["GitTree", GitObject]] = Field(
        default=None, union_mode="left_to_right"
    )


class GitTreeContents(BaseModel):
    """Entries of a tree, as selected on a commit."""
    entries: Optional[List[GitTreeEntry]] = None


class GitTree(GitTreeContents):
    """A nested tree, tagged with `__typename == "Tree"`."""
    model_config = ConfigDict(populate_by_name=True)

    typename: Literal["Tree"] = Field(alias="__typename")


class GitCommit(BaseModel):
    """Commit a branch points to, tagged with `__typename == "Commit"`."""
    model_config = ConfigDict(populate_by_name=True)

    typename: Literal["Commit"] = Field(alias="__typename")
    tree: Optional[GitTreeContents] = None


GitTreeEntry.model_rebuild()


class BranchRef(BaseModel):
    target: Optional[Union[GitCommit, GitObject]] = Field(
        default=None, union_mode="left_to_right"
    )


class RepositoryNode(BaseModel):
    """A repository of the viewer as returned by the GraphQL API."""
    name: str
    owner: RepositoryOwner
    isPrivate: bool = False
    diskUsage: Optional[int] = None
    defaultBranchRef: Optional[BranchRef] = None


class RepositoryEdge(BaseModel):
    cursor: Optional[str] = None


class ViewerRepositories(BaseModel):
    """One page of `viewer.repositories`. Nodes are null for inaccessible repositories."""
    nodes: Optional[List[Optional[RepositoryNode]]] = None
    edges: Optional[List[Optional[RepositoryEdge]]] = None

    def last_cursor(self) -> Optional[str]:
        if not self.edges or self.edges[-1] is None:
            return None
        return self.edges[-1].cursor

    def cursor_at(self, index: int) -> Optional[str]:
        if not self.edges or index >= len(self.edges) or self.edges[index] is None:
            return None
        return self.edges[index].cursor


class WebhookConfig(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    url: Optional[str] = None
    content_type: Optional[str] = None
    secret: Optional[str] = None
    insecure_ssl: Optional[str] = None


class LastWebhookResponse(BaseModel):
    code: Optional[int] = None
    status: Optional[str] = None
    message: Optional[str] = None


class Webhook(BaseModel):
    """Repository webhook from the REST API."""
    id: int
    name: str
    active: bool
    type: str
    events: List[str]
    config: WebhookConfig
    updated_at: str
    created_at: str
    url: str
    test_url: str
    ping_url: str
    deliveries_url: Optional[str] = None
    last_response: LastWebhookResponse


class FileContent(BaseModel):
    """File from the REST contents API. `content` is base64 encoded."""
    content: str
    url: str


class PageRequest(BaseModel):
    token: str
    count: int
    cursor: Optional[str] = None


class RepositoryContentSummary(BaseModel):
    files_count: int = 0
    config_file_path: Optional[str] = None


class RepositorySummary(BaseModel):
    """Entry of the repositories list."""
    name: str
    size: int
    owner: RepositoryOwner


class RepositoryRecord(BaseModel):
    """Aggregated repository, enriched by the webhook and config file phases."""
    name: str
    owner: RepositoryOwner
    is_private: bool
    files_count: int = 0
    webhooks: List[Webhook] = Field(default_factory=list)
    config_file_path: Optional[str] = None
    config_file_content: Optional[str] = None


class RepositoriesListOutput(BaseModel):
    repositories: List[RepositorySummary]
    cursor: Optional[str] = None


class RepositoriesDetailsOutput(BaseModel):
    repositories: List[RepositoryRecord]
    cursor: Optional[str] = None
