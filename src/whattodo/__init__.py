"""WhatToDo: console to-do client with a month calendar filter."""

__version__ = "0.1.0"
