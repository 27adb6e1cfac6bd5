"""Service layer — ID operations returning ServiceResult.

Services may import from domain and config layers.
"""
