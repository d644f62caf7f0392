"""Provider type schema utilities."""
