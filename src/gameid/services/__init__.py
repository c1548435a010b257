"""Service layer — operations returning ServiceResult.

Services may import from the domain layer.
They must never import from commands or output.
"""
