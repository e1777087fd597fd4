"""
Pydantic schemas returned by the service layer.

Every schema is built while its session is still open and is fully
detached from the ORM afterwards.
"""
