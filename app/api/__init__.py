"""HTTP API for AEO Scanner."""
