"""
Application package for the Ledger API.

``main.create_app`` assembles the FastAPI application; ``core`` holds
configuration, database access, security and errors; ``schemas`` the
pydantic models; ``services`` the stores; ``api`` the HTTP routes.
"""
