"""Ordered rule cascades.

A cascade is a tuple of rules tried top to bottom; the first rule whose
predicate holds produces the result. Order encodes precedence: lexical
exceptions first, then phonological patterns, then the default.
"""
from typing import Any, Callable, NamedTuple


class Rule(NamedTuple):
    name: str
    applies: Callable[[Any], bool]
    form: Callable[[Any], Any]


def always(_):
    return True


def find_rule(rules, subject):
    for rule in rules:
        if rule.applies(subject):
            return rule
    raise LookupError("No rule applies; a cascade must end with a default rule.")


def apply_rules(rules, subject):
    """Run the first applicable rule and return its result as a list of forms."""
    forms = find_rule(rules, subject).form(subject)
    if isinstance(forms, str):
        return [forms]
    return list(forms)
