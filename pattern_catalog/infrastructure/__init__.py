"""Infrastructure layer - registry, singleton access, logging and error handling."""
