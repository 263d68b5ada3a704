"""
Boundary layer: AWS service clients and external AI provider adapters.
"""
