"""Core: configuration, domain models, contracts and the command services.

Nothing in here performs I/O except through an injected gateway.
"""
