"""Core interfaces.

Structural contracts (Protocol) implemented by concrete adapters, so the
core depends on abstractions rather than on a specific output channel.
"""
