"""Application layer: the login and registration protocols."""
