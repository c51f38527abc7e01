"""GraphQL type definitions, one file per schema module."""
