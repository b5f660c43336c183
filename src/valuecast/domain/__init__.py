"""Domain layer — primitive types, coercion rules, and the compatibility table.

This layer depends only on the standard library.
It must never import from services, backends, commands, or config.
"""
