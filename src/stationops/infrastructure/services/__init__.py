"""Infrastructure services: tokens and outbound email."""
