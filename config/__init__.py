"""
Settings loaded from the environment.
"""
