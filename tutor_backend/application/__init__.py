"""
Application layer: use-case services called by the Lambda handlers.
"""
