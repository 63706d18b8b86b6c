"""
Schemas module - Request/Response schemas for API endpoints.

Stored Mongo documents are validated into the same models on the way out,
so a response can only ever contain the fields declared here.
"""
