"""Application configuration and security helpers."""
