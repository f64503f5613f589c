"""Domain layer - graph store, traversal, and reduction.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
