# -*- coding: utf-8 -*-
"""
People directory used by the create project wizard.

Maps person ids to display names for owner, contributor and
stakeholder pickers and for the Review step.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from utils.helpers import get_initials


@dataclass(frozen=True)
class PersonEntry:
    """A selectable person."""
    person_id: str
    display_name: str
    avatar_url: Optional[str] = None

    @property
    def initials(self) -> str:
        return get_initials(self.display_name)


DEFAULT_PEOPLE = (
    PersonEntry("jason-d", "Jason D"),
    PersonEntry("alex-morgan", "Alex Morgan"),
    PersonEntry("sarah-chen", "Sarah Chen"),
    PersonEntry("mike-ross", "Mike Ross"),
    PersonEntry("harrold", "Harrold"),
    PersonEntry("james", "James Boarnd"),
    PersonEntry("mitch", "Mitch Sato"),
)


class PeopleDirectory:
    """In-memory id -> person lookup."""

    def __init__(self, people: Iterable[PersonEntry] = DEFAULT_PEOPLE):
        self._people: Dict[str, PersonEntry] = {p.person_id: p for p in people}

    def __contains__(self, person_id: str) -> bool:
        return person_id in self._people

    def __len__(self) -> int:
        return len(self._people)

    def get(self, person_id: Optional[str]) -> Optional[PersonEntry]:
        if not person_id:
            return None
        return self._people.get(person_id)

    def display_name(self, person_id: Optional[str], default: str = "") -> str:
        person = self.get(person_id)
        return person.display_name if person else default

    def people(self) -> List[PersonEntry]:
        """All people sorted by display name."""
        return sorted(self._people.values(), key=lambda p: p.display_name.lower())

    @classmethod
    def from_mapping(cls, names: Dict[str, str]) -> 'PeopleDirectory':
        """Build a directory from a plain {id: display name} mapping."""
        return cls(PersonEntry(person_id, name) for person_id, name in names.items())
