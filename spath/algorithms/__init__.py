"""Shortest-path engines and their shared per-run structures."""
