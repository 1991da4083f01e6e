# singleton/course.py
from typing import Optional

from absl import logging as absl_logging

INITIAL_COURSE_NAME = "Programación App Móvil"
INIT_LINE = "[SE INVOCA LA CLASE SOLO LA PRIMERA VEZ]"
CLIENT_INIT_LINE = "[MÉTODO INICIAL]"


class Singleton:
    """
    Process-wide course name.
      - built lazily on first access, announcing itself exactly once
      - every assignment to course_name prints the value and bumps change_count,
        even when the value does not change
    Not thread-safe: there is no locking around the shared state.
    """
    _instance: Optional["Singleton"] = None

    def __new__(cls) -> "Singleton":
        if cls._instance is None:
            print(INIT_LINE)
            instance = super().__new__(cls)
            instance._course_name = INITIAL_COURSE_NAME
            instance._change_count = 0
            cls._instance = instance
        return cls._instance

    @classmethod
    def instance(cls) -> "Singleton":
        return cls()

    @property
    def course_name(self) -> str:
        return self._course_name

    @course_name.setter
    def course_name(self, value: str) -> None:
        self._course_name = value
        self._change_count += 1
        self.print_name()

    @property
    def change_count(self) -> int:
        return self._change_count

    def print_name(self) -> None:
        print(self._course_name)

    def reset(self) -> None:
        """Back to the initial course name with a zero change count. Does not re-announce."""
        self._course_name = INITIAL_COURSE_NAME
        self._change_count = 0
        absl_logging.debug("[Singleton] Reset to %r", INITIAL_COURSE_NAME)


class CourseClient:
    """Any caller of the singleton: announces itself, then shows the shared course name."""
    def __init__(self) -> None:
        print(CLIENT_INIT_LINE)
        Singleton.instance().print_name()
