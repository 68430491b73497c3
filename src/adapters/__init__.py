"""Adapters: concrete output sinks."""
