"""
Repository layer: storage access behind an abstract interface.
"""
