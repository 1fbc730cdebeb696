"""Module implementing the keyword extraction from tagged documents."""
