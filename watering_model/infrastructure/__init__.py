"""Infrastructure: HTTP transport and concrete repositories."""
