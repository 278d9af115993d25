"""
Smoke checks and Lighthouse thresholds for a deployed static website.
"""

__version__ = "1.0.0"
