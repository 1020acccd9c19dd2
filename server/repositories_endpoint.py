from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from strawberry.fastapi import GraphQLRouter

from github_repos import GitHubAPI, RepositoriesDeps, SchemaParser, create_logger
from github_repos.config import (
    APP_PORT,
    CONFIG_FILE_EXTENSION,
    GITHUB_API_URL,
    GITHUB_GRAPHQL_URL,
    LOGGING_LEVEL,
    MAX_TREE_DEPTH,
    REQUEST_TIMEOUT,
)
from repositories_schema import schema

logger = create_logger(LOGGING_LEVEL)
schema_parser = SchemaParser()


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT) as client:
        app.state.api = GitHubAPI(
            client,
            graphql_url=GITHUB_GRAPHQL_URL,
            api_url=GITHUB_API_URL,
            max_depth=MAX_TREE_DEPTH,
        )
        logger.info("GitHub GraphQL API at %s, REST API at %s", GITHUB_GRAPHQL_URL, GITHUB_API_URL)
        yield
        logger.info("Shutting down GitHub client...")


async def get_context(request: Request):
    """Request-scoped dependencies of the GraphQL resolvers."""
    return {
        "deps": RepositoriesDeps(
            api=request.app.state.api,
            logger=logger,
            schema_parser=schema_parser,
            config_file_extension=CONFIG_FILE_EXTENSION,
        )
    }


app = FastAPI(title="GitHub Repositories Gateway", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

graphql_app = GraphQLRouter(schema, context_getter=get_context)
app.include_router(graphql_app, prefix="/graphql")


@app.get("/health")
async def health_check():
    """Health check endpoint to verify the server is running."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting FastAPI server on http://0.0.0.0:{APP_PORT}")
    uvicorn.run(app, host="0.0.0.0", port=APP_PORT)
