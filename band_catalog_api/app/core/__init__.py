"""Configuration, logging, persistence and error handling primitives."""
