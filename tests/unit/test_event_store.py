# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.
"""Unit tests for EventStore."""

import json

import pytest

from tenant_hub.core.errors import InvalidArgumentError


class TestEventStore:
    def test_create_returns_event(self, event_store):
        evt = event_store.create_and_publish("company_a", "hello")
        assert evt.tenant_id == "company_a"
        assert evt.message == "hello"
        assert event_store.list_events("company_a") == [evt]

    def test_publishes_serialized_event_to_own_tenant(self, event_store, broadcaster, make_sink):
        sink_a, sink_b = make_sink(), make_sink()
        broadcaster.subscribe("company_a", "ws-a", sink_a)
        broadcaster.subscribe("company_b", "ws-b", sink_b)

        evt = event_store.create_and_publish("company_a", "hello")

        assert len(sink_a.payloads) == 1
        payload = json.loads(sink_a.payloads[0])
        assert payload["id"] == evt.id
        assert payload["tenant_id"] == "company_a"
        assert payload["message"] == "hello"
        assert sink_b.payloads == []

    def test_fifo_per_tenant(self, event_store, broadcaster, make_sink):
        sink = make_sink()
        broadcaster.subscribe("company_a", "ws-a", sink)
        for i in range(5):
            event_store.create_and_publish("company_a", f"m{i}")

        delivered = [json.loads(p)["message"] for p in sink.payloads]
        stored = [e.message for e in event_store.list_events("company_a")]
        assert delivered == stored == ["m0", "m1", "m2", "m3", "m4"]

    def test_partitioned_by_tenant(self, event_store):
        event_store.create_and_publish("company_a", "a1")
        event_store.create_and_publish("company_b", "b1")
        event_store.create_and_publish("company_a", "a2")
        assert len(event_store.list_events("company_a")) == 2
        assert len(event_store.list_events("company_b")) == 1
        assert len(event_store.list_events("company_c")) == 0

    def test_empty_tenant_rejected(self, event_store):
        with pytest.raises(InvalidArgumentError):
            event_store.create_and_publish("", "hello")
        assert event_store.list_events("") == []

    def test_empty_message_rejected(self, event_store):
        with pytest.raises(InvalidArgumentError):
            event_store.create_and_publish("company_a", "")
        assert len(event_store.list_events("company_a")) == 0

    def test_subscriber_failure_does_not_fail_store(self, event_store, broadcaster):
        def broken(payload):
            raise ConnectionError("gone")

        broadcaster.subscribe("company_a", "dead", broken)
        evt = event_store.create_and_publish("company_a", "still stored")
        assert event_store.list_events("company_a") == [evt]

    def test_list_events_returns_copy(self, event_store):
        event_store.create_and_publish("company_a", "x")
        event_store.list_events("company_a").clear()
        assert len(event_store.list_events("company_a")) == 1
