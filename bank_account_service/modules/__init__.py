"""Domain modules grouped by aggregate."""
