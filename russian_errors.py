class DeclensionError(Exception):
    """Base class of the errors raised by the declension engine."""


class InvalidLemma(DeclensionError, ValueError):
    """The lemma cannot be declined as given: empty text, or a missing or bad gender."""


class UnsupportedForm(DeclensionError):
    """The engine knows no inflection for this lemma and case.

    Callers are expected to catch it and treat the form as unknown.
    """
