"""Grundrechte-Podcast Studio backend: lessons, badges and a scored script workshop."""
