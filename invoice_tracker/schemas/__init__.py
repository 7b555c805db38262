"""
Pydantic schemas for API request and response validation.

Invoice models use camelCase JSON aliases over snake_case field names.
"""
