from newsletter.model import UniversityNewsletter
from newsletter.view import NewsletterDisplayListener


def test_display_prints_fixed_format(capsys):
    listener = NewsletterDisplayListener(display_name="Pagina Web")

    listener.display("Progra 2", 30)

    assert capsys.readouterr().out == "Mostrando en Pagina Web [Curso Progra 2 abierto con capacidad de 30]\n"


def test_update_refreshes_fields_renders_and_returns_listener(capsys):
    listener = NewsletterDisplayListener(display_name="Teléfono")

    result = listener.update("Estructuras", 15)

    assert result is listener
    assert (listener.course_name, listener.course_max) == ("Estructuras", 15)
    assert capsys.readouterr().out == "Mostrando en Teléfono [Curso Estructuras abierto con capacidad de 15]\n"


def test_equality_ignores_owning_newsletter():
    a = NewsletterDisplayListener(display_name="Teléfono", newsletter=UniversityNewsletter())
    b = NewsletterDisplayListener(display_name="Teléfono", newsletter=UniversityNewsletter())

    assert a == b
    assert a != NewsletterDisplayListener(display_name="Teléfono", course_name="Progra 2", course_max=30)


def test_repr_does_not_walk_into_the_newsletter():
    newsletter = UniversityNewsletter()
    listener = NewsletterDisplayListener(display_name="Teléfono", newsletter=newsletter)
    newsletter.subscribe(listener)

    assert "newsletter" not in repr(listener)
