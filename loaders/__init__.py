"""Loaders for JSON manifests and army descriptions."""
