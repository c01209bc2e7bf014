"""
handlers/ - Presentation Layer
================================
FastAPI routers. Each handler decodes the request, borrows a pooled
connection, delegates to the appropriate Repository, and returns the result.
Error-to-status translation lives in ``app.py``, not here.
"""
