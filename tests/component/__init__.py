"""
Component tests for the shop API

Requests go through the FastAPI routes, the cart and catalog services and a
real SQLite database, with no internal mocking.
"""
