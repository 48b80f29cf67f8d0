"""Asset lifecycle notifications service."""
