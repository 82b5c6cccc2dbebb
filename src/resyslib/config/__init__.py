"""Configuration loading and path policy for resyslib."""
