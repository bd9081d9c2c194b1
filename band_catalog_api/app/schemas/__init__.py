"""
Pydantic schema definitions for API payloads.

Schemas describe what the API returns.  Request bodies are read as
plain dictionaries and checked by ``core.validation`` so that the
first offending field is reported with a 400 response.
"""
