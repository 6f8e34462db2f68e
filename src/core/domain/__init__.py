"""Domain models and exceptions.

Pure data structures (Pydantic v2): no HTTP, no CLI, no chat SDK.
"""
