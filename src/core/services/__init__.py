"""Core services: parsing, operation selection and dispatch."""
