from .academic import Department, Year, Section, YearLabel, YEAR_ALIASES, normalize_year
from .user import User, Role, AUTHOR_ROLES
from .schedule import Schedule, Weekday, Recurrence, weekday_order
from .announcement import Announcement, Category, Audience
from .reminder import Reminder, Priority, RelatedSubject

__all__ = [
    "Department", "Year", "Section", "YearLabel", "YEAR_ALIASES", "normalize_year",
    "User", "Role", "AUTHOR_ROLES",
    "Schedule", "Weekday", "Recurrence", "weekday_order",
    "Announcement", "Category", "Audience",
    "Reminder", "Priority", "RelatedSubject",
]
