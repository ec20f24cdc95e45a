"""
Example collection builders for the proof-of-concept roster.

Builds an Employee object collection from raw database-like rows through a
CollectionFactory, plus a couple of scalar collections derived from it.
"""
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from typekit.collection import IntCollection, StringCollection, TypedCollection
from typekit.factory import CollectionFactory
from typekit.interfaces import Arrayable


@dataclass
class Employee(Arrayable):
    name: str
    department: str
    salary: int
    manager_id: Optional[int] = None

    def to_array(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return self.name


EXAMPLE_ROWS: List[Dict[str, Any]] = [
    {"name": "Ada", "department": "Engineering", "salary": 5200},
    {"name": "Grace", "department": "Engineering", "salary": 6100, "manager_id": 0},
    {"name": "Linus", "department": "Operations", "salary": 4300, "manager_id": 0},
    {"name": "Barbara", "department": "Research", "salary": 5800},
]


def build_example_roster(factory: Optional[CollectionFactory] = None) -> TypedCollection:
    """Register the Employee collection (if needed) and load EXAMPLE_ROWS into it."""
    factory = factory or CollectionFactory()
    if not factory.is_registered("Employee"):
        factory.register_object_collection("Employee", Employee)
    return factory.create_from_array("Employee", EXAMPLE_ROWS)


def build_example_salaries(roster: TypedCollection) -> IntCollection:
    return IntCollection(roster.column("salary"))


def build_example_departments(roster: TypedCollection) -> StringCollection:
    """Distinct department names, sorted."""
    departments = StringCollection(roster.column("department")).unique()
    departments.sort()
    return departments
