from typing import Iterable

from kisaanmitra.catalog.models import CropDefinition, WorkflowStep
from kisaanmitra.core.errors import NotFoundError


def find_crop(catalog: Iterable[CropDefinition], crop_id: str) -> CropDefinition:
    for crop in catalog:
        if crop.id == crop_id:
            return crop
    raise NotFoundError(f"crop '{crop_id}' is not in the catalog")


def find_step(crop: CropDefinition, step_index: int) -> WorkflowStep:
    # Negative indices must not wrap around to the end of the workflow
    if step_index < 0 or step_index >= len(crop.workflow):
        raise NotFoundError(
            f"crop '{crop.id}' has no step {step_index} "
            f"(workflow has {len(crop.workflow)} steps)"
        )
    return crop.workflow[step_index]
