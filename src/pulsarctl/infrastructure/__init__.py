"""Infrastructure layer — the HTTP admin client.

This layer depends on stdlib, httpx, and the domain value types it
serializes. It must never import from services, commands, or output.
"""
