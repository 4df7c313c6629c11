"""Centralized Enum Definitions"""

import enum


class StudentStatus(str, enum.Enum):
    """Enrollment status of a student"""
    ACTIVE = "active"
    INACTIVE = "inactive"
    GRADUATED = "graduated"
    SUSPENDED = "suspended"


class CourseStatus(str, enum.Enum):
    """Course offering status"""
    ACTIVE = "active"
    INACTIVE = "inactive"
    COMPLETED = "completed"


class DayOfWeek(str, enum.Enum):
    """Days of the week for course schedules"""
    MONDAY = "Mon"
    TUESDAY = "Tue"
    WEDNESDAY = "Wed"
    THURSDAY = "Thu"
    FRIDAY = "Fri"
    SATURDAY = "Sat"
    SUNDAY = "Sun"


class SortOrder(str, enum.Enum):
    """Direction for sorted list endpoints"""
    ASC = "asc"
    DESC = "desc"
