# apps/core/utils/__init__.py
"""
Core utilities package
"""
