"""
Tutoring assistant serverless backend.

Lambda handlers, provider adapters and session storage for the
multi-provider AI tutoring service.
"""
