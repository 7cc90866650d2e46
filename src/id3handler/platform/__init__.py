"""Cross-cutting runtime services."""
