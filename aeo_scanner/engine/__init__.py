"""Analysis pipeline and score aggregation."""
