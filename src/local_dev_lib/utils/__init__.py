"""Filesystem utilities."""
