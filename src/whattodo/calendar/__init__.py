"""
Calendar subsystem.

Components:
- dates.py: ISO date codec + badge formatting
- grid.py: 6x7 Monday-first month grid
- state.py: displayed month + selected filter date
"""
