"""Infrastructure layer - storage, external services, logging and errors."""
