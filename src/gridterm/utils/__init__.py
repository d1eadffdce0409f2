"""Support utilities."""
