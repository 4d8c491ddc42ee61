"""
Working date-time calculator for Colombia's civil calendar.
"""

__version__ = "1.0.0"
