"""HTTP request/response schemas (pydantic).

Kept separate from domain entities. Field aliases carry the camelCase
names existing clients send and expect.
"""
