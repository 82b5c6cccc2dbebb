"""Provider ports and selection."""
