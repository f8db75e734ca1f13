"""Configuration layer — decoder defaults and logging setup."""
