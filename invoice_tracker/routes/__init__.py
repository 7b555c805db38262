"""
FastAPI routers for all API endpoints.

Each module defines a router for one concern (invoices, health).
"""
