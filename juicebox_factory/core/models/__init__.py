"""Domain enums and API I/O models."""
