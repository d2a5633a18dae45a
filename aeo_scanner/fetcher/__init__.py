"""Page fetching."""
