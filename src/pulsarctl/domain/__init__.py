"""Domain layer — value parsers, names, policies, and command metadata.

This layer depends only on stdlib, pydantic, and :mod:`pulsarctl.errors`.
It must never import from services, infrastructure, commands, or config.
"""
