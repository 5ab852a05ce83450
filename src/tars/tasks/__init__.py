"""Task entity and the list that owns it."""

from tars.tasks.model import Deadline, Event, Task, Todo, Variant
from tars.tasks.task_list import TaskList

__all__ = ["Deadline", "Event", "Task", "TaskList", "Todo", "Variant"]
