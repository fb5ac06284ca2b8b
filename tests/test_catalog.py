import pytest

from kisaanmitra.catalog.library import CULTIVATION_LIBRARY
from kisaanmitra.catalog.lookup import find_crop, find_step
from kisaanmitra.catalog.models import (
    CropDefinition,
    Season,
    StepCategory,
    WaterRequirement,
    WorkflowStep,
)
from kisaanmitra.core.errors import NotFoundError


def test_wheat_has_four_steps_with_s1_rewards():
    wheat = find_crop(CULTIVATION_LIBRARY, "c1")
    assert wheat.name == "Wheat (Grade A)"
    assert len(wheat.workflow) == 4

    first = find_step(wheat, 0)
    assert first.id == "s1"
    assert (first.points, first.eco_points) == (100, 50)
    assert first.category is StepCategory.preparation


def test_step_ids_are_unique_within_each_crop():
    for crop in CULTIVATION_LIBRARY:
        ids = [step.id for step in crop.workflow]
        assert len(ids) == len(set(ids)), crop.id


def test_crop_ids_are_unique():
    ids = [crop.id for crop in CULTIVATION_LIBRARY]
    assert len(ids) == len(set(ids))


def test_unknown_crop_is_not_found():
    with pytest.raises(NotFoundError):
        find_crop(CULTIVATION_LIBRARY, "does-not-exist")


@pytest.mark.parametrize("index", [-1, 4, 99])
def test_out_of_range_step_is_not_found(index):
    wheat = find_crop(CULTIVATION_LIBRARY, "c1")
    with pytest.raises(NotFoundError):
        find_step(wheat, index)


def test_crop_without_workflow_has_no_steps():
    bare = CropDefinition(
        id="x1", name="Fallow", category="None",
        season=Season.zaid, water_requirement=WaterRequirement.low,
    )
    assert bare.workflow == ()
    with pytest.raises(NotFoundError):
        find_step(bare, 0)


def test_negative_rewards_are_rejected():
    with pytest.raises(ValueError):
        WorkflowStep(id="bad", title="t", description="d",
                     category=StepCategory.sowing, points=-1)


def test_catalog_entries_are_immutable():
    wheat = find_crop(CULTIVATION_LIBRARY, "c1")
    with pytest.raises(Exception):
        wheat.name = "Changed"


def test_to_dict_uses_display_values():
    data = find_crop(CULTIVATION_LIBRARY, "c1").to_dict()
    assert data["season"] == "Rabi"
    assert data["step_count"] == 4
    assert data["workflow"][0]["category"] == "Preparation"
    assert data["workflow"][0]["verification_type"] == "camera"


def test_library_covers_every_crop_in_order():
    assert [crop.id for crop in CULTIVATION_LIBRARY] == [
        "c1", "c2", "c3", "c4", "c5", "c6", "c7", "c8", "c9",
    ]


@pytest.mark.parametrize("crop_id, name, first_step, last_step", [
    ("c3", "Cotton (Bt)", "ct1", "ct10"),
    ("c4", "Sugarcane", "sg1", "sg10"),
    ("c6", "Potato", "pt1", "pt10"),
    ("c7", "Maize (Corn)", "mz1", "mz10"),
    ("c9", "Turmeric", "tu1", "tu10"),
])
def test_ten_phase_workflows(crop_id, name, first_step, last_step):
    crop = find_crop(CULTIVATION_LIBRARY, crop_id)
    assert crop.name == name
    assert len(crop.workflow) == 10
    assert crop.workflow[0].id == first_step
    assert crop.workflow[0].category is StepCategory.preparation
    assert crop.workflow[-1].id == last_step
    assert crop.workflow[-1].category is StepCategory.harvest


def test_turmeric_final_step_rewards():
    curing = find_step(find_crop(CULTIVATION_LIBRARY, "c9"), 9)
    assert curing.title == "Harvesting & Curing"
    assert (curing.points, curing.eco_points) == (300, 200)
