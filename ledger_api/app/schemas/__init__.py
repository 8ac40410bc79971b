"""
Pydantic schema definitions for API payloads.

Users and transactions each define their own request and response
models.  Schemas are separated from the stores to decouple the API
representation from persistence.
"""
