"""Technical infrastructure: logging."""
