"""GraphQL service for creating and reading routes."""

__version__ = "0.1.0"
