# notifier/observer.py
from abc import ABC, abstractmethod


class INewsletterListener(ABC):
    @abstractmethod
    def update(self, course_name: str, course_max: int) -> "INewsletterListener":
        """Called when the subject (Newsletter) opens a course. Returns the refreshed listener."""
        ...


class IDisplay(ABC):
    @abstractmethod
    def display(self, course_name: str, course_max: int) -> None:
        """Render the course information to the display sink."""
        ...


class INewsletter(ABC):
    @abstractmethod
    def subscribe(self, subscriber: INewsletterListener) -> None: ...
    @abstractmethod
    def unsubscribe(self, subscriber: INewsletterListener) -> None: ...
    @abstractmethod
    def notify_subscribers(self) -> None: ...
