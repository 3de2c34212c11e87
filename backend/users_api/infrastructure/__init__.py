"""Infrastructure Layer — store gateway and logging setup."""
