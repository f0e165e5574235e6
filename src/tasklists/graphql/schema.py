"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..auth.factory import get_credential_service
from ..auth.identity import build_request_context
from ..logging import get_logger
from ..store import DataStore
from .access_control import REQUEST_CONTEXT_KEY
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(store: DataStore | None = None) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    data_store = store or DataStore()
    credentials = get_credential_service()

    async def get_context(request: Request) -> dict[str, Any]:
        """Build the per-request context, resolving the caller's identity once."""
        request_context = await build_request_context(
            request.headers.get("authorization"), data_store, credentials
        )
        return {
            "request": request,
            REQUEST_CONTEXT_KEY: request_context,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=True,
        context_getter=get_context,
    )
