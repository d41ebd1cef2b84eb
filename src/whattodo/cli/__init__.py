"""
Console front end.

Components:
- bootstrap.py: composition root (settings -> http client -> services -> controller)
- commands.py: slash-command registry and handlers
- render.py: plain-text rendering of the task list and the month grid
- main.py: entry point
"""
