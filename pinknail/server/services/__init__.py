"""
Business services.

Each service wraps the repositories of one resource, applies its business
rules and raises domain exceptions from ``pinknail.core.exceptions``.
"""
