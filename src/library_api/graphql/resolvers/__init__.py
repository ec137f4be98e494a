"""Resolver package for the GraphQL schema.

Root fields in ``queries.root`` and ``mutations.root`` delegate to the
functions in the sibling modules.
"""
