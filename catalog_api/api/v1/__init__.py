"""
API v1.
"""
