"""Contracts implemented by adapters (Protocol-based)."""
