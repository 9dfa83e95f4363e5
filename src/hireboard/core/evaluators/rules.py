"""Keyword rule tables shared by the evaluators.

Tables are ordered: the first rule whose keyword list matches wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, TypeVar


def contains_any(text: str, keywords: Iterable[str], *, case_sensitive: bool = False) -> bool:
    if case_sensitive:
        return any(keyword in text for keyword in keywords)
    lowered = text.lower()
    return any(keyword.lower() in lowered for keyword in keywords)


@dataclass(frozen=True)
class RoleBucket:
    """Role category with relevance for the most recent and earlier positions."""

    name: str
    keywords: tuple[str, ...]
    primary: float
    subsequent: float

    def relevance(self, index: int) -> float:
        return self.primary if index == 0 else self.subsequent


@dataclass(frozen=True)
class SkillTier:
    """Skill category worth a fixed number of points per matching skill."""

    name: str
    keywords: tuple[str, ...]
    points: float


RuleT = TypeVar("RuleT", RoleBucket, SkillTier)


def coerce_rules(rules: Iterable[Any], rule_type: type[RuleT]) -> tuple[RuleT, ...]:
    """Accept rule objects or plain mappings (as read from YAML)."""
    coerced: list[RuleT] = []
    for rule in rules:
        if isinstance(rule, rule_type):
            coerced.append(rule)
        elif isinstance(rule, Mapping):
            payload = dict(rule)
            payload["keywords"] = tuple(payload.get("keywords", ()))
            coerced.append(rule_type(**payload))
        else:
            raise TypeError(f"Cannot build {rule_type.__name__} from {rule!r}")
    return tuple(coerced)


def first_match(text: str, rules: Iterable[RuleT]) -> RuleT | None:
    for rule in rules:
        if contains_any(text, rule.keywords):
            return rule
    return None


DEFAULT_ROLE_BUCKETS: tuple[RoleBucket, ...] = (
    RoleBucket(
        name="technical",
        keywords=(
            "Engineer",
            "Developer",
            "Architect",
            "CTO",
            "Technical",
            "Software",
            "Full Stack",
            "Frontend",
            "Backend",
        ),
        primary=1.0,
        subsequent=0.8,
    ),
    RoleBucket(
        name="managerial",
        keywords=("Manager", "Director", "Lead", "CEO", "CTO", "VP", "Head", "Chief"),
        primary=0.9,
        subsequent=0.7,
    ),
    RoleBucket(
        name="business",
        keywords=("Analyst", "Consultant", "Product Manager", "Business", "Marketing", "Sales"),
        primary=0.7,
        subsequent=0.5,
    ),
    RoleBucket(
        name="legal",
        keywords=("Attorney", "Legal", "Lawyer", "Counsel", "Partner"),
        primary=0.8,
        subsequent=0.6,
    ),
)

OTHER_ROLE_BUCKET = RoleBucket(name="other", keywords=(), primary=0.2, subsequent=0.2)

DEFAULT_SKILL_TIERS: tuple[SkillTier, ...] = (
    SkillTier(
        name="high_value",
        keywords=(
            "React",
            "JavaScript",
            "TypeScript",
            "Python",
            "Java",
            "AWS",
            "Docker",
            "Node JS",
            "Next JS",
        ),
        points=2.0,
    ),
    SkillTier(
        name="medium_value",
        keywords=("Angular", "Vue", "PHP", "C#", "MongoDB", "PostgreSQL", "Redis"),
        points=1.5,
    ),
    SkillTier(
        name="business",
        keywords=("Project Management", "Agile", "Scrum", "Analytics", "Marketing"),
        points=1.0,
    ),
)

DEFAULT_LEADERSHIP_KEYWORDS: tuple[str, ...] = (
    "Manager",
    "Director",
    "Lead",
    "Partner",
    "CEO",
    "CTO",
    "Founder",
)
