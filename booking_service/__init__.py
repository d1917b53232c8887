"""Flight booking microservice."""
