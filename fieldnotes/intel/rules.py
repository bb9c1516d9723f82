"""Ordered first-match rule tables.

A rule table is a sequence of ``Rule(label, predicate)`` pairs. Rules are
evaluated in order and the first predicate that returns True decides the
label; later rules are never evaluated.
"""

from typing import Any, Callable, NamedTuple, Sequence


class Rule(NamedTuple):
    label: str
    predicate: Callable[[Any], bool]


def first_match(rules: Sequence[Rule], subject: Any, default: str) -> str:
    """Return the label of the first rule whose predicate accepts ``subject``."""
    for rule in rules:
        if rule.predicate(subject):
            return rule.label
    return default


def keyword_rules(table: Sequence[tuple[str, Sequence[str]]]) -> list[Rule]:
    """Build substring rules from ``(label, keywords)`` pairs.

    The subject of the resulting rules is a lowercase scan buffer.
    """
    return [
        Rule(label, lambda buffer, kws=tuple(keywords): any(k in buffer for k in kws))
        for label, keywords in table
    ]
