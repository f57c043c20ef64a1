"""
Model registration for the brands app.

Models live in the infrastructure layer; importing them here lets Django
discover them when the app registry is populated.
"""

from brands.infrastructure.models import Brand  # noqa: F401
