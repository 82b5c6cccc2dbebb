"""Use cases operating on the local filesystem."""
