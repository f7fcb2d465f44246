"""Account registration, login and contact relay service."""
