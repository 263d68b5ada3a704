"""
AWS Lambda entry points.

Each deployed function points at one ``(event, context)`` callable in
these modules, e.g. ``tutor_backend.handlers.sessions.create_handler``.
"""
