"""Slug derivation from source paths."""
