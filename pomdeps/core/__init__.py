"""Service layer: configuration, file access, output and the resolve workflow."""
