"""Storage adapters for the identity repositories."""
