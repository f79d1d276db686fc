"""Output rendering."""
