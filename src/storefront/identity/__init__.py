"""Users, credentials and session tokens."""
