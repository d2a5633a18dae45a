"""Page type classification."""
