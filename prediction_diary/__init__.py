"""Prediction Diary: weekly prediction posts for personality-classed users."""

__version__ = "1.0.0"
