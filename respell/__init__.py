"""Glyphs, respelling rewrite rules, substitution lookups and edit estimates for English words."""

__version__ = "0.1.0"