"""Models for the signup dashboard.

- types:  pydantic models shaped for the API
- domain: plain dataclasses used inside the aggregation layer
"""
