"""
Products module - Product catalog management.

This module handles:
- Product entity and its field rules
- Product validation of raw form input
- Product operations (create, update, delete, lookup, listing, featured toggle)
- Product repository (port) and Django ORM adapter
"""
