"""Interoperability with third-party geometry libraries."""
