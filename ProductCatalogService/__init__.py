"""
Product Catalog Service Django project.
"""
