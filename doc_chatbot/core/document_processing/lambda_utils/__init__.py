"""
Lambda helper utilities: environment validation, request parsing, responses.
"""
