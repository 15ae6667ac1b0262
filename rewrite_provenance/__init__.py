"""Provenance recording for bulk reference-rewrite operations."""
