"""
Blog List Backend Application, root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic (models, validation, repositories), MongoDB infrastructure
and list aggregation helpers.
"""
