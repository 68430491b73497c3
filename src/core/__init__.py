"""Core: configuration, domain, interfaces and services."""
