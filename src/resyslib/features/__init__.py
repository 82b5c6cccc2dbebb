"""Feature packages grouped by concern."""
