"""Business rules and persistence services."""
