"""Adapters connecting the domain to documents and storage."""
