from __future__ import annotations

import json

import pytest

from honcheonui_softlayer.softlayer import filters, masks
from honcheonui_softlayer.softlayer.filters import Path


def test_ticket_predicates_merge_into_one_nested_filter() -> None:
    built = filters.build(
        Path("tickets.group.name").not_contains("Sales"),
        Path("tickets.firstUpdate.editorType").in_("AUTO", "EMPLOYEE"),
        Path("tickets.createDate").date_after("01/15/2024 12:30:00"),
    )

    assert built == {
        "tickets": {
            "group": {"name": {"operation": "!~ Sales"}},
            "firstUpdate": {
                "editorType": {
                    "operation": "in",
                    "options": [{"name": "data", "value": ["AUTO", "EMPLOYEE"]}],
                }
            },
            "createDate": {
                "operation": "greaterThanDate",
                "options": [{"name": "date", "value": ["01/15/2024 12:30:00"]}],
            },
        }
    }


def test_predicates_carry_operation_and_options() -> None:
    assert Path("hostname").not_contains("web").as_leaf() == {"operation": "!~ web"}
    assert Path("id").in_().as_leaf() == {
        "operation": "in",
        "options": [{"name": "data", "value": []}],
    }


def test_duplicate_and_conflicting_paths_are_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        filters.build(Path("tickets.id").in_("1"), Path("tickets.id").in_("2"))

    with pytest.raises(ValueError, match="Conflicting"):
        filters.build(
            Path("tickets.group").not_contains("x"), Path("tickets.group.name").not_contains("y")
        )

    with pytest.raises(ValueError, match="Invalid filter path"):
        filters.build(Path("..").not_contains("x"))


def test_encode_is_compact_and_stable() -> None:
    encoded = filters.encode({"b": {"operation": "1"}, "a": {"operation": "2"}})
    assert encoded == '{"a":{"operation":"2"},"b":{"operation":"1"}}'
    assert json.loads(encoded)["b"]["operation"] == "1"


def test_mask_render_wraps_and_dedupes_paths() -> None:
    assert masks.render(("id", "accountId", "id", " users.id ")) == "mask[id,accountId,users.id]"


def test_mask_render_requires_a_path() -> None:
    with pytest.raises(ValueError):
        masks.render(())


def test_ticket_mask_covers_every_mapped_field() -> None:
    for path in (
        "id",
        "accountId",
        "assignedUserId",
        "group.name",
        "subject.name",
        "status.name",
        "firstUpdate.editorType",
        "firstUpdate.entry",
        "title",
        "createDate",
        "modifyDate",
        "attachedVirtualGuests.users.id",
        "attachedResources",
    ):
        assert path in masks.TICKET_MASK
