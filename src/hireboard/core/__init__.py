"""Core infrastructure: database, errors, logging, auth and permissions."""
