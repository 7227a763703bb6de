"""Schema, description, command and registry types used by the parsers."""
