"""Pure rules for comparing tag records."""
