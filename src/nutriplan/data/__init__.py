"""Reference food data."""
