# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from rentdesk.core.errors import ConflictError, NotFoundError, ValidationError
from rentdesk.core.primitives import MaintenanceStatusEnum, NotificationTypeEnum
from rentdesk.lifecycle import (
    add_maintenance_request,
    add_notification,
    delete_maintenance_request,
    mark_all_notifications_read,
    mark_notification_read,
    unread_count,
    update_maintenance_status,
)
from rentdesk.query import Flag, StatusEquals, filter_records
from tests.conftest import make_notification


class TestMaintenance:
    def test_add_request(self, store):
        request = add_maintenance_request(
            store, "r3", "AC not cooling", "2024-03-15", description="Unit 201", priority="high"
        )

        assert request.status == MaintenanceStatusEnum.OPEN
        assert request.priority.value == "high"
        assert store.get("maintenance") == (request,)

    def test_room_must_exist(self, store):
        with pytest.raises(NotFoundError):
            add_maintenance_request(store, "gone", "Leak", "2024-03-15")

    @pytest.mark.parametrize("kwargs", [{"title": ""}, {"date": "15-03-2024"}, {"priority": "whenever"}])
    def test_validation(self, store, kwargs):
        data = {"room_id": "r1", "title": "Leak", "date": "2024-03-15"}
        data.update(kwargs)
        with pytest.raises(ValidationError):
            add_maintenance_request(store, **data)

    def test_status_moves_forward(self, store):
        request = add_maintenance_request(store, "r1", "Leak", "2024-03-15")

        assert update_maintenance_status(store, request.id, "in-progress").status == MaintenanceStatusEnum.IN_PROGRESS
        assert update_maintenance_status(store, request.id, "completed").status == MaintenanceStatusEnum.COMPLETED
        assert not store.find("maintenance", request.id).is_open

    def test_status_can_skip_stage(self, store):
        request = add_maintenance_request(store, "r1", "Leak", "2024-03-15")
        assert update_maintenance_status(store, request.id, "completed").status == MaintenanceStatusEnum.COMPLETED

    def test_status_cannot_go_back(self, store):
        request = add_maintenance_request(store, "r1", "Leak", "2024-03-15")
        update_maintenance_status(store, request.id, "completed")

        with pytest.raises(ConflictError):
            update_maintenance_status(store, request.id, "open")

    def test_same_status_is_noop(self, store):
        request = add_maintenance_request(store, "r1", "Leak", "2024-03-15")
        version = store.version

        update_maintenance_status(store, request.id, "open")

        assert store.version == version

    def test_delete_request(self, store):
        request = add_maintenance_request(store, "r1", "Leak", "2024-03-15")
        delete_maintenance_request(store, request.id)

        assert store.get("maintenance") == ()

    def test_filter_by_status(self, store):
        first = add_maintenance_request(store, "r1", "Leak", "2024-03-15")
        add_maintenance_request(store, "r2", "Bulb", "2024-03-16")
        update_maintenance_status(store, first.id, "in-progress")

        result = filter_records(store.get("maintenance"), StatusEquals("status", "in-progress"))
        assert [r.id for r in result] == [first.id]


class TestNotifications:
    def test_add_and_count(self, store):
        add_notification(store, "Overdue Payment", "2024-03-15T10:00:00", type="payment", priority="high")
        add_notification(store, "System Maintenance", "2024-03-14T20:00:00")

        assert unread_count(store) == 2
        assert store.get("notifications")[0].type == NotificationTypeEnum.PAYMENT

    def test_mark_read(self, store):
        store.replace("notifications", [make_notification("n1"), make_notification("n2")])

        mark_notification_read(store, "n1")
        version = store.version
        mark_notification_read(store, "n1")

        assert store.version == version
        assert unread_count(store) == 1
        with pytest.raises(NotFoundError):
            mark_notification_read(store, "n9")

    def test_mark_all_read(self, store):
        store.replace("notifications", [make_notification("n1"), make_notification("n2", read=True)])

        assert mark_all_notifications_read(store) == 1
        assert unread_count(store) == 0
        assert mark_all_notifications_read(store) == 0

    def test_unread_only_by_type(self, store):
        store.replace(
            "notifications",
            [
                make_notification("n1", type="payment"),
                make_notification("n2", type="payment", read=True),
                make_notification("n3", type="tenant"),
            ],
        )

        result = filter_records(
            store.get("notifications"), StatusEquals("type", "payment"), Flag("read", False)
        )
        assert [n.id for n in result] == ["n1"]
