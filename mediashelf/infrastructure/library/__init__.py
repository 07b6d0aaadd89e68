"""Library infrastructure layer."""
