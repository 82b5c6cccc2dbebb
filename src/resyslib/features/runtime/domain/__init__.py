"""Platform value objects."""
