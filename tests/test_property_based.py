"""Property-based tests using hypothesis."""

from hypothesis import given, strategies as st

from beam.events import Event
from tests.mocks import Host, Recorder

tags = st.lists(st.sampled_from("abcdef"), max_size=20)


class TestPropertyBased:
    """Property-based tests for dispatch invariants."""

    @given(tags)
    def test_emit_order_matches_registration(self, registered):
        """Property: listeners run in registration order, duplicates included."""
        # Arrange
        host = Host()
        rec = Recorder()
        listeners = {tag: rec.listener(tag) for tag in set(registered)}
        for tag in registered:
            host.on("evt", listeners[tag])

        # Act
        host.emit("evt")

        # Assert
        assert rec.tags == registered

    @given(tags, st.lists(st.integers()))
    def test_emit_args_order_and_payload(self, registered, payload):
        """Property: emit_args hands every listener exactly the given args."""
        host = Host()
        rec = Recorder()
        for tag in registered:
            host.on("evt", rec.listener(tag))

        host.emit_args("evt", *payload)

        assert rec.tags == registered
        assert all(args == tuple(payload) for _, args in rec.calls)

    @given(st.integers(min_value=1, max_value=20), st.data())
    def test_stop_cuts_off_later_listeners(self, count, data):
        """Property: nothing after the stopping listener runs."""
        stopper = data.draw(st.integers(min_value=0, max_value=count - 1))
        host = Host()
        rec = Recorder()
        for i in range(count):
            host.on("evt", rec.listener(str(i), "stop" if i == stopper else None))

        evt = host.emit("evt")

        assert rec.tags == [str(i) for i in range(stopper + 1)]
        assert evt.is_stopped and evt.is_default_stopped

    @given(st.lists(st.sampled_from(["stop", "stop_default"]), max_size=10))
    def test_latches_are_monotonic(self, calls):
        """Property: stopped implies default-stopped and flags never reset."""
        evt = Event(name="evt", emitter=Host())
        seen_stop = seen_default = False

        for call in calls:
            getattr(evt, call)()
            seen_stop = seen_stop or call == "stop"
            seen_default = True

            assert evt.is_stopped == seen_stop
            assert evt.is_default_stopped == seen_default
            assert not evt.is_stopped or evt.is_default_stopped

    @given(tags, st.sampled_from("abcdef"))
    def test_unsubscribe_removes_only_matching(self, registered, removed):
        """Property: other listeners keep their relative order."""
        host = Host()
        rec = Recorder()
        listeners = {tag: rec.listener(tag) for tag in "abcdef"}
        for tag in registered:
            host.on("evt", listeners[tag])

        host.unsubscribe("evt", listeners[removed])
        host.emit("evt")

        assert rec.tags == [tag for tag in registered if tag != removed]
