"""User interfaces for id3handler."""
