"""
Remote API access.

Components:
- http.py: JSON-over-HTTP helper (httpx) with uniform error messages
- task_service.py: /tasks endpoints
- category_service.py: /categories endpoints
"""
