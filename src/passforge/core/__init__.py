"""Core building blocks: character classes, secure randomness, errors."""
