"""Example applications for Collares.

This package demonstrates framework usage but is not part of the core API.
"""
