"""User interfaces built on top of the library."""
