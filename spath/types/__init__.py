"""Shared type aliases, the algorithm selector and weight monoids."""
