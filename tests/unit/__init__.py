"""
Unit tests for the cart service and bearer authentication.
"""
