"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions and the operation result type
- Infrastructure abstractions (view cache, database utilities)
- Health check views
"""
