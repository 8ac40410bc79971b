"""
Store layer.

Each store owns one table and receives the application's ``Database``
in its constructor.  Endpoints never run SQL themselves.
"""
