"""Protocol adapters (REST, data repository, GraphQL) over the domain services."""
