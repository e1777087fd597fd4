"""Core infrastructure: exceptions, logging and dependency wiring."""
