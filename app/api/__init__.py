"""
API layer for the blog list backend.

Exposes JSON endpoints for blogs (/api/blogs) and users (/api/users).
"""
