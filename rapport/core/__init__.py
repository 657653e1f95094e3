"""Configuration, persistence, logging and authentication plumbing."""
