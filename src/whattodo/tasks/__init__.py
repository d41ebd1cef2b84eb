"""
Task subsystem.

Components:
- task_models.py: Task shape, normalization of backend records, create payloads
- filters.py: pure filters used to build the visible task list
"""
