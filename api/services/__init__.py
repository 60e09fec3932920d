"""
Service layer behind the API routes.
"""
