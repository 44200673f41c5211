"""GraphQL surface mounted next to the REST routers."""

from .schema import create_graphql_router, schema

__all__ = ["create_graphql_router", "schema"]
