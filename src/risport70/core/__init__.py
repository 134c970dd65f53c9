"""Core: configuration, errors, domain types and contracts."""
