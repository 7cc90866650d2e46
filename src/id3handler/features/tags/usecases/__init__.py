"""Tag read/update/remove use cases."""
