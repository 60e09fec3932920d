"""
FastAPI routers.
"""
