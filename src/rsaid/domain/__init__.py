"""Domain layer — ID layout, decoding rules, and models.

This layer depends only on stdlib, pydantic, and python-stdnum.
It must never import from services or config.
"""
