"""
Cross-cutting helpers for the user service: settings read from the
environment and logging configuration. Nothing here knows about users.
"""
