"""Application services: the named command registry and the stdio bridge.

Why here:
- Entry points (CLI, bridge, tests) share one invocation surface instead of
  each wiring gateway calls by hand.
"""
