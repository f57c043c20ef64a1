"""
Brands module - catalog Brand and Product management.

This module handles:
- Brand and Product entities and domain logic
- Catalog commands, queries and handlers
- Repository ports
- Infrastructure (Django ORM adapters)
"""
