"""
Pydantic schema definitions for API payloads.

Users, the response envelope and sign-up/profile payloads each have
their own module.
"""
