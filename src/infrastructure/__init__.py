"""Technical infrastructure: logging and registries."""
