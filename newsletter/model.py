# newsletter/model.py
from typing import List, Tuple

from absl import logging as absl_logging

from notifier.observer import INewsletter, INewsletterListener


class UniversityNewsletter(INewsletter):
    """Observable newsletter holding the currently opened course."""
    def __init__(self, course_name: str = "", course_max: int = 0) -> None:
        self._subscribers: List[INewsletterListener] = []
        self._course_name = course_name
        self._course_max = course_max

    @property
    def course_name(self) -> str:
        return self._course_name

    @property
    def course_max(self) -> int:
        return self._course_max

    @property
    def subscribers(self) -> Tuple[INewsletterListener, ...]:
        return tuple(self._subscribers)

    def subscribe(self, subscriber: INewsletterListener) -> None:
        # duplicates allowed, each one is notified
        self._subscribers.append(subscriber)
        absl_logging.debug("[Newsletter] Subscribed %r (%d total)", subscriber, len(self._subscribers))

    def unsubscribe(self, subscriber: INewsletterListener) -> None:
        # removes the first equal entry only
        try:
            self._subscribers.remove(subscriber)
        except ValueError:
            absl_logging.debug("[Newsletter] %r is not subscribed, nothing to remove", subscriber)
            return
        absl_logging.debug("[Newsletter] Unsubscribed %r (%d left)", subscriber, len(self._subscribers))

    def notify_subscribers(self) -> None:
        for sub in list(self._subscribers):
            try:
                sub.update(self._course_name, self._course_max)
            except Exception as e:
                absl_logging.error("[Newsletter] Subscriber %r failed: %s", sub, e)

    def update_data(self, course_name: str, course_max: int) -> "UniversityNewsletter":
        self._course_name = course_name
        self._course_max = course_max
        self.notify_subscribers()
        return self

    def __repr__(self) -> str:
        return (f"UniversityNewsletter(course_name={self._course_name!r}, "
                f"course_max={self._course_max!r}, subscribers={len(self._subscribers)})")
