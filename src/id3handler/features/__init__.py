"""Feature packages for id3handler."""
