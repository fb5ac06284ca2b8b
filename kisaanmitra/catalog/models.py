"""
Catalog value types: crops and their ordered cultivation workflow.

Both are frozen; a journey copies the step ids it needs at creation time
and never holds a reference to these objects.
"""
import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple


class StepCategory(str, enum.Enum):
    preparation = "Preparation"
    sowing = "Sowing"
    maintenance = "Maintenance"
    protection = "Protection"
    harvest = "Harvest"
    post_harvest = "Post-Harvest"


class VerificationType(str, enum.Enum):
    camera = "camera"
    checklist = "checklist"  # not implemented, camera only
    sensor = "sensor"  # not implemented, camera only


class Season(str, enum.Enum):
    kharif = "Kharif"
    rabi = "Rabi"
    zaid = "Zaid"


class WaterRequirement(str, enum.Enum):
    low = "Low"
    medium = "Medium"
    high = "High"


@dataclass(frozen=True)
class WorkflowStep:
    """One phase of a crop's workflow; its index in the workflow is the phase number."""
    id: str
    title: str
    description: str
    category: StepCategory
    points: int = 0
    eco_points: int = 0
    icon: str = "Sprout"
    verification_type: VerificationType = VerificationType.camera
    estimated_days: int = 1
    tools: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    tutorial_video: Optional[str] = None

    def __post_init__(self):
        if self.points < 0 or self.eco_points < 0:
            raise ValueError(f"step {self.id}: rewards must be non-negative")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "points": self.points,
            "eco_points": self.eco_points,
            "icon": self.icon,
            "verification_type": self.verification_type.value,
            "estimated_days": self.estimated_days,
            "tools": list(self.tools),
            "warnings": list(self.warnings),
            "tutorial_video": self.tutorial_video,
        }


@dataclass(frozen=True)
class CropDefinition:
    """Catalog entry for a crop."""
    id: str
    name: str
    category: str
    season: Season
    water_requirement: WaterRequirement
    water_instruction: str = ""
    soil_suitability: Tuple[str, ...] = ()
    spacing: str = ""
    fun_fact: str = ""
    subsidies: Tuple[str, ...] = ()
    care_tips: Tuple[str, ...] = ()
    workflow: Tuple[WorkflowStep, ...] = field(default_factory=tuple)

    def to_dict(self, include_workflow: bool = True) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "season": self.season.value,
            "water_requirement": self.water_requirement.value,
            "water_instruction": self.water_instruction,
            "soil_suitability": list(self.soil_suitability),
            "spacing": self.spacing,
            "fun_fact": self.fun_fact,
            "subsidies": list(self.subsidies),
            "care_tips": list(self.care_tips),
            "step_count": len(self.workflow),
        }
        if include_workflow:
            data["workflow"] = [step.to_dict() for step in self.workflow]
        return data
