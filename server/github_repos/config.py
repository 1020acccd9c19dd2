"""Configuration constants for the repositories gateway."""

import os

from dotenv import load_dotenv

load_dotenv()

GITHUB_GRAPHQL_URL = os.getenv("GITHUB_GRAPHQL_URL", "https://api.github.com/graphql")
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com")
APP_PORT = int(os.getenv("APP_PORT", "8000"))
LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

# Extension of the repository file whose content is attached to the output
CONFIG_FILE_EXTENSION = os.getenv("CONFIG_FILE_EXTENSION", ".yml")
# Nesting depth of the tree selection in the details query
MAX_TREE_DEPTH = int(os.getenv("MAX_TREE_DEPTH", "8"))

MIN_REPOSITORIES_COUNT = 1
MAX_REPOSITORIES_COUNT = 20

__all__ = [
    "GITHUB_GRAPHQL_URL",
    "GITHUB_API_URL",
    "APP_PORT",
    "LOGGING_LEVEL",
    "REQUEST_TIMEOUT",
    "CONFIG_FILE_EXTENSION",
    "MAX_TREE_DEPTH",
    "MIN_REPOSITORIES_COUNT",
    "MAX_REPOSITORIES_COUNT",
]
