"""Service layer — decoding operations returning ServiceResult.

Services may import from domain and config layers.
"""
