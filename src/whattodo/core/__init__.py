"""
Core of the to-do client.

Components:
- ports.py: Protocols the controller depends on
- state.py: AppState (tasks, categories, calendar, filters, last error)
- todo.py: TodoController, the actions the view triggers
"""
