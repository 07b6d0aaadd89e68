"""Infrastructure layer: persistence, HTTP and security adapters."""
