"""Retrieval-augmented chat endpoint for a small portfolio knowledge base."""

__version__ = "0.1.0"
