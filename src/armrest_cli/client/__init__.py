"""HTTP client, authentication and errors."""
