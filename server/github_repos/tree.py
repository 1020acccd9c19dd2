"""Walks the default-branch tree of a repository.

Counts files and locates the first config file, depth-first in entry order.
Only blobs qualify as config files, so a directory named like one is walked
instead.
Only objects tagged as `Tree` are descended into; submodules and empty
selections are skipped.
"""

from typing import Optional

from .types import GitCommit, GitTree, GitTreeContents, RepositoryContentSummary, RepositoryNode


def summarize_tree(tree: Optional[GitTreeContents], extension: str) -> RepositoryContentSummary:
    files_count = 0
    config_file_path: Optional[str] = None

    if tree is None or not tree.entries:
        return RepositoryContentSummary()

    for entry in tree.entries:
        if entry.type is None:
            continue

        if entry.type == "blob":
            files_count += 1
            if config_file_path is None and entry.extension == extension and entry.path:
                config_file_path = entry.path
            continue

        if not isinstance(entry.object, GitTree):
            continue

        nested = summarize_tree(entry.object, extension)
        files_count += nested.files_count

        if config_file_path is None:
            config_file_path = nested.config_file_path

    return RepositoryContentSummary(files_count=files_count, config_file_path=config_file_path)


def summarize_commit(commit: GitCommit, extension: str) -> RepositoryContentSummary:
    return summarize_tree(commit.tree, extension)


def summarize_repository(repository: RepositoryNode, extension: str) -> RepositoryContentSummary:
    """Summary of the commit the default branch points to, empty for anything else."""
    branch = repository.defaultBranchRef
    target = branch.target if branch else None
    if not isinstance(target, GitCommit):
        return RepositoryContentSummary()
    return summarize_commit(target, extension)
