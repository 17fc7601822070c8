"""
models/project.py
-----------------
Domain models for DIY projects and their materials, steps and categories.
Field names match the column names of the project tables one to one.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass
class Material:
    """A material needed by one project."""
    project_id: Optional[int] = None
    material_name: str = ""
    num_required: Optional[int] = None
    cost: Optional[Decimal] = None
    material_id: Optional[int] = None

    def __str__(self) -> str:
        return f"ID={self.material_id}, materialName={self.material_name}, numRequired={self.num_required}, cost={self.cost}"


@dataclass
class Step:
    """One step of a project; `step_order` determines its position."""
    project_id: Optional[int] = None
    step_text: str = ""
    step_order: int = 0
    step_id: Optional[int] = None

    def __str__(self) -> str:
        return f"ID={self.step_id}, stepText={self.step_text}"


@dataclass
class Category:
    """A category that projects can be filed under (many-to-many)."""
    category_name: str = ""
    category_id: Optional[int] = None

    def __str__(self) -> str:
        return f"ID={self.category_id}, categoryName={self.category_name}"


@dataclass
class Project:
    """
    A DIY project and, when fetched individually, its child collections.

    Attributes:
        project_name: Name of the project (required).
        estimated_hours: Estimated effort in hours.
        actual_hours: Hours actually spent.
        difficulty: Difficulty rating, 1 (easy) to 5 (hard).
        notes: Free-form notes.
        project_id: Database primary key (None until inserted).
        materials: Materials needed; empty unless fetched by ID.
        steps: Steps in `step_order`; empty unless fetched by ID.
        categories: Associated categories; empty unless fetched by ID.
    """
    project_name: str
    estimated_hours: Optional[Decimal] = None
    actual_hours: Optional[Decimal] = None
    difficulty: Optional[int] = None
    notes: Optional[str] = None
    project_id: Optional[int] = None
    materials: list[Material] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)

    def __str__(self) -> str:
        lines = [
            f"   ID={self.project_id}",
            f"   name={self.project_name}",
            f"   estimatedHours={self.estimated_hours}",
            f"   actualHours={self.actual_hours}",
            f"   difficulty={self.difficulty}",
            f"   notes={self.notes}",
            "   Materials:",
        ]
        lines.extend(f"      {m}" for m in self.materials)
        lines.append("   Steps:")
        lines.extend(f"      {s}" for s in self.steps)
        lines.append("   Categories:")
        lines.extend(f"      {c}" for c in self.categories)
        return "\n".join(lines)
