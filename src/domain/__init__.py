"""
Domain Layer - Series aggregate, business rules and ports.

This layer has no dependency on infrastructure or application code.
"""
