"""Value objects for file and permission descriptions."""
