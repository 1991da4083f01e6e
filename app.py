# app.py
from typing import Sequence

from absl import app
from absl import logging as absl_logging

from newsletter.model import UniversityNewsletter
from newsletter.view import NewsletterDisplayListener
from singleton.course import CourseClient, Singleton

# ------------------ CONFIG ------------------
GREETING = "Hola Universidad Nacional de Costa Rica."

DISPLAY_NAMES = ("Teléfono", "Pagina Web")
DEMO_COURSE_NAME = "Progra 2"
DEMO_COURSE_MAX = 30

DEMO_SINGLETON_NAMES = ("Programación Web", "Programación Funcional")


class App:
    @property
    def greeting(self) -> str:
        return GREETING


def run_observer_demo() -> UniversityNewsletter:
    # Subject
    monthly_newsletter = UniversityNewsletter()

    # Observers
    for name in DISPLAY_NAMES:
        monthly_newsletter.subscribe(
            NewsletterDisplayListener(display_name=name, newsletter=monthly_newsletter)
        )

    absl_logging.info("[APP] Opening %s for %d students", DEMO_COURSE_NAME, DEMO_COURSE_MAX)
    return monthly_newsletter.update_data(DEMO_COURSE_NAME, DEMO_COURSE_MAX)


def run_singleton_demo() -> Singleton:
    singleton = Singleton.instance()
    singleton.print_name()
    for name in DEMO_SINGLETON_NAMES:
        singleton.course_name = name
        CourseClient()
    absl_logging.info("[APP] Singleton changed %d times", singleton.change_count)
    return singleton


def main(argv: Sequence[str]) -> None:
    if len(argv) > 1:
        raise app.UsageError("Too many command-line arguments.")

    print(App().greeting)
    run_observer_demo()
    run_singleton_demo()


def run() -> None:
    app.run(main)


if __name__ == "__main__":
    run()
