"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_errors.py: errors reported to the user
- task_store.py: JSON-file storage (whole list load/save)
- task_api.py: add/update/delete/status/list operations over a store
"""
