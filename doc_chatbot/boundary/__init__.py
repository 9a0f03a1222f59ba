"""
Boundary modules for external systems.
"""
