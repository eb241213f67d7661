"""
Core value types and floating-point primitives.

This module contains the foundational building blocks: IEEE-754 format
descriptions and value objects that are guaranteed finite.
"""
