"""Use cases grouped by concern."""
