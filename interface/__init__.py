"""Drivers around the core game: terminal CLI and REST API."""
