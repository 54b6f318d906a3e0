"""CLI commands for Navbridge."""
