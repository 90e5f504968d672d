"""
Task repository interface.
"""

from focus_hub.interfaces.scheduled_item_repository import IScheduledItemRepository
from focus_hub.models.task import TaskItem


class ITaskRepository(IScheduledItemRepository[TaskItem]):
    """Abstract interface for task persistence."""

    pass
