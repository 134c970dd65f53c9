"""Adapters: HTTP transport, SOAP codec and the RISPort70 client (pure I/O)."""
