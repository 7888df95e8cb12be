"""Command-line client for the Anthropic docs server."""
