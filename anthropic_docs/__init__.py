"""Claude 4.5 documentation server."""
