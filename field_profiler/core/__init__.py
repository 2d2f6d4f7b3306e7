"""Configuration, constants, exceptions and logging setup."""
