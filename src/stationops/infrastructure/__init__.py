"""Infrastructure adapters: HTTP API, persistence, auth and outbound services."""
