"""Domain models and result types.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about HTTP, CLI or the bridge: only TipChain concepts.
"""
