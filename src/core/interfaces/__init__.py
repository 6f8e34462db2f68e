"""Core interfaces.

Protocols implemented by the concrete adapters (HTTP upstreams, alias file,
chat platform). Services depend on these, never on the adapters.
"""
