"""Domain layer — encoding table, checksum arithmetic, validation, generation.

This layer depends only on stdlib.
It must never import from services or config.
"""
