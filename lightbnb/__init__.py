"""
LightBnB data access layer.
Parameterized queries for users, reservations and property listings.
"""

__version__ = "1.0.0"
