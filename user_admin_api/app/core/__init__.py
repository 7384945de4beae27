"""
Cross-cutting application concerns: settings, logging setup and
exception handlers.
"""
