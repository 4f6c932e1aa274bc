"""Infrastructure layer - logging and variant registries."""
