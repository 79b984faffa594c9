"""Infrastructure - configuration and logging."""
