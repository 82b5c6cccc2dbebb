"""Infrastructure shared across features (logging, filesystem helpers)."""
