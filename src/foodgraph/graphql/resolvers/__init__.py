"""Resolver package for GraphQL schema.

Resolvers forward arguments to the data access client and convert the
returned records into GraphQL types.
"""
