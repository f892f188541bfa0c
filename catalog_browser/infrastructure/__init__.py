"""Infrastructure layer - configuration, logging and the catalog HTTP client."""
