"""Domain layer of the identity core."""
