"""Concrete platform providers."""
