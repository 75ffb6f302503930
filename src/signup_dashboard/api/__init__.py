"""API module for the signup dashboard.

API layer:
- Serves the cached summary as JSON and the front-end files
- Collapses upstream failures into a generic error payload
- Forbidden: aggregation logic, talking to the sheet directly
"""
