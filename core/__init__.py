"""Stat aggregation and battle comparison rules."""
