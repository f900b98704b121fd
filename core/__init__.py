"""
Core types and exceptions shared by the checker.
"""
