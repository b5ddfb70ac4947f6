"""
Actions Gateway service.
"""
