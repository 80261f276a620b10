from todoapp.models.user import User
from todoapp.models.task import Task
from todoapp.models.notification import Notification
from todoapp.models.user_preference import UserPreference

__all__ = ["User", "Task", "Notification", "UserPreference"]
