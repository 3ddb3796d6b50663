"""
Tutorial-specific Specifications

Concrete specifications for querying tutorials.
"""

from models import Tutorial
from .specifications import Specification


class TutorialTitleContainsSpec(Specification[Tutorial]):
    """Tutorials whose title contains a fragment, ignoring case."""

    def __init__(self, fragment: str):
        """
        Initialize specification.

        Args:
            fragment: Text to look for in the title. LIKE wildcards
                (% and _) are matched literally.
        """
        self.fragment = fragment

    def is_satisfied_by(self, tutorial: Tutorial) -> bool:
        """Check if the tutorial title contains the fragment."""
        return self.fragment.lower() in (tutorial.title or "").lower()

    def to_sql_filter(self):
        """Convert to SQL filter."""
        return Tutorial.title.icontains(self.fragment, autoescape=True)


class TutorialPublishedSpec(Specification[Tutorial]):
    """Tutorials with a given published flag."""

    def __init__(self, published: bool = True):
        self.published = published

    def is_satisfied_by(self, tutorial: Tutorial) -> bool:
        return bool(tutorial.published) == self.published

    def to_sql_filter(self):
        return Tutorial.published.is_(self.published)
