"""
Core business logic: chunking pipeline and exception hierarchy.
"""
