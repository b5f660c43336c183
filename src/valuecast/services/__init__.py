"""Service layer — conversion flow and matrix queries returning ServiceResult.

Services may import from the domain layer and use backend protocols.
They must never import from commands or output.
"""
