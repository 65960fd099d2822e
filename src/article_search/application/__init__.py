"""Application – article list query compilation and its enrichment steps."""
