"""
Middleware layer for Prediction Diary.

This package contains middleware components for request processing,
such as correlation IDs.
"""
