"""HTML document wrapper."""
