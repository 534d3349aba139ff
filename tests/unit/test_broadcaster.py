# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.
"""Unit tests for the Broadcaster contract and InMemoryBroadcaster."""

import pytest

from tenant_hub.core.context import HubContext
from tenant_hub.kernel.broadcaster import Broadcaster, InMemoryBroadcaster


class TestInMemoryBroadcaster:
    def test_publish_and_subscribe(self, make_sink):
        b = InMemoryBroadcaster()
        sink = make_sink()
        b.subscribe("company_a", "c1", sink)

        assert b.publish("company_a", "hello") == 1
        assert sink.payloads == ["hello"]

    def test_tenant_isolation(self, make_sink):
        b = InMemoryBroadcaster()
        sink_a, sink_b = make_sink(), make_sink()
        b.subscribe("company_a", "c1", sink_a)
        b.subscribe("company_b", "c2", sink_b)

        b.publish("company_a", "for a")

        assert sink_a.payloads == ["for a"]
        assert sink_b.payloads == []

    def test_publish_without_subscribers(self):
        assert InMemoryBroadcaster().publish("nobody", "x") == 0

    def test_unsubscribe(self, make_sink):
        b = InMemoryBroadcaster()
        sink = make_sink()
        b.subscribe("company_a", "c1", sink)
        assert b.unsubscribe("company_a", "c1") is True
        b.publish("company_a", "late")
        assert sink.payloads == []
        assert b.topics() == []

    def test_unsubscribe_is_idempotent(self):
        b = InMemoryBroadcaster()
        assert b.unsubscribe("company_a", "ghost") is False

    def test_failing_sink_does_not_affect_others(self, make_sink):
        b = InMemoryBroadcaster()
        good = make_sink()

        def broken(payload):
            raise RuntimeError("connection closed")

        b.subscribe("company_a", "bad", broken)
        b.subscribe("company_a", "good", good)

        assert b.publish("company_a", "one") == 1
        assert good.payloads == ["one"]
        # The failed subscriber is dropped.
        assert b.subscriber_count("company_a") == 1

    def test_counts(self, make_sink):
        b = InMemoryBroadcaster()
        b.subscribe("company_a", "c1", make_sink())
        b.subscribe("company_a", "c2", make_sink())
        b.subscribe("company_b", "c3", make_sink())
        assert b.subscriber_count("company_a") == 2
        assert b.subscriber_count() == 3
        assert sorted(b.topics()) == ["company_a", "company_b"]


class _PublishOnly(Broadcaster):
    def publish(self, topic, payload):
        return 0

    def subscribe(self, topic, connection_id, sink):
        pass

    def unsubscribe(self, topic, connection_id):
        return False


class TestBroadcasterContract:
    def test_introspection_is_required(self):
        with pytest.raises(TypeError):
            _PublishOnly()

    def test_context_accepts_any_broadcaster(self, directory, blob_store, make_sink):
        b = InMemoryBroadcaster()
        hub = HubContext(directory=directory, blobs=blob_store, broadcaster=b)
        sink = make_sink()
        b.subscribe("company_a", "c1", sink)

        hub.events.create_and_publish("company_a", "via context")
        assert hub.broadcaster is b
        assert len(sink.payloads) == 1
