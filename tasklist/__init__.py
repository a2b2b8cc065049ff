"""
tasklist - Local To-Do List Manager

Keeps an ordered list of tasks in memory and persists it to a plain text
file with one comma-delimited record per line.
"""

__version__ = "0.1.0"

# Avoid imports here so that `python -m tasklist.tasks` stays light
# Modules should be imported directly when needed
