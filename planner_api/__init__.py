"""Event Planning Platform API."""
