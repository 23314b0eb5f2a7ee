"""
Core of the task list.

Components:
- models.py: Task and its stored/wire shape
- collection.py: ordered in-memory list with add/toggle/remove/clear
- commands.py: user actions as values (AddTask, ToggleTask, RemoveTask, ClearAll)
- controller.py: dispatch + the save/render/notify cycle
- ports.py: Protocols the hosts implement
"""
