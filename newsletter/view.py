# newsletter/view.py
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from notifier.observer import IDisplay, INewsletterListener

if TYPE_CHECKING:
    from newsletter.model import UniversityNewsletter

DISPLAY_FORMAT = "Mostrando en {display_name} [Curso {course_name} abierto con capacidad de {course_max}]"


@dataclass
class NewsletterDisplayListener(INewsletterListener, IDisplay):
    """
    Observer View that prints every course the newsletter opens.
      - equality is by value (display name + course fields)
      - the owning newsletter is kept for reference only, it is never
        compared nor mutated from here
    """
    display_name: str = ""
    course_name: str = ""
    course_max: int = 0
    newsletter: Optional["UniversityNewsletter"] = field(default=None, compare=False, repr=False)

    # ---- Observer API ----
    def update(self, course_name: str, course_max: int) -> "NewsletterDisplayListener":
        self.course_name = course_name
        self.course_max = course_max
        self.display(self.course_name, self.course_max)
        return self

    # ---- Display ----
    def display(self, course_name: str, course_max: int) -> None:
        print(DISPLAY_FORMAT.format(display_name=self.display_name,
                                    course_name=course_name,
                                    course_max=course_max))
