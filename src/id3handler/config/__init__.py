"""Configuration loading and filesystem locations."""
