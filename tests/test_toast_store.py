from toastqueue import Toast, ToastAction, ToastStore, ToastSettings


def titles(store):
    return [t.title for t in store.list()]


def test_end_to_end_scenario(store):
    assert store.add("info", "A", duration_ms=0) == "toast-1"
    ids = [store.add("info", name, duration_ms=0) for name in ("B", "C", "D")]
    assert ids == ["toast-2", "toast-3", "toast-4"]
    assert titles(store) == ["B", "C", "D"]
    store.remove("toast-3")
    assert titles(store) == ["B", "D"]
    assert [t.id for t in store.list()] == ["toast-2", "toast-4"]


def test_add_returns_unique_ids_and_records_fields(store):
    action = ToastAction("Undo", lambda: None)
    tid = store.add(
        "success", "Saved", description="Profile saved", action=action, duration_ms=0
    )
    toast = store.get(tid)
    assert isinstance(toast, Toast)
    assert toast.variant == "success"
    assert toast.title == "Saved"
    assert toast.description == "Profile saved"
    assert toast.action is action
    assert toast.persistent
    assert toast.created_at == 1


def test_action_is_never_invoked(store, scheduler):
    calls = []
    tid = store.add("info", "Retry?", action=ToastAction("Retry", lambda: calls.append(1)))
    store.remove(tid)
    scheduler.advance(60_000)
    assert calls == []


def test_list_is_a_snapshot(store):
    store.add("info", "A", duration_ms=0)
    snapshot = store.list()
    snapshot.clear()
    assert titles(store) == ["A"]


def test_remove_is_idempotent(store):
    tid = store.add("info", "A", duration_ms=0)
    store.add("info", "B", duration_ms=0)
    assert store.remove(tid) is True
    after_once = store.list()
    assert store.remove(tid) is False
    assert store.list() == after_once


def test_remove_unknown_id_is_noop_without_notification(store):
    seen = []
    store.subscribe(seen.append)
    assert store.remove("toast-999") is False
    assert seen == []


def test_notifies_once_per_add_even_with_eviction(store):
    for name in "ABC":
        store.add("info", name, duration_ms=0)
    seen = []
    store.subscribe(seen.append)
    store.add("info", "D", duration_ms=0)
    assert len(seen) == 1
    assert [t.title for t in seen[0].toasts] == ["B", "C", "D"]
    assert seen[0].count == 3


def test_subscribers_never_observe_over_capacity(make_store):
    store = make_store(max_toasts=2)
    counts = []
    store.subscribe(lambda state: counts.append(state.count))
    for i in range(6):
        store.add("info", f"T{i}", duration_ms=0)
    assert counts and max(counts) <= 2


def test_unsubscribe_stops_notifications(store):
    seen = []
    unsubscribe = store.subscribe(seen.append)
    store.add("info", "A", duration_ms=0)
    unsubscribe()
    unsubscribe()  # idempotent
    store.add("info", "B", duration_ms=0)
    assert len(seen) == 1
    assert store.subscriber_count == 0


def test_subscriber_failure_is_isolated(store):
    order = []

    def bad(_state):
        order.append("bad")
        raise RuntimeError("boom")

    store.subscribe(bad)
    store.subscribe(lambda _state: order.append("good"))
    tid = store.add("info", "A", duration_ms=0)
    assert order == ["bad", "good"]
    assert tid in store
    assert len(store.subscriber_errors) == 1
    assert isinstance(store.subscriber_errors[0][1], RuntimeError)


def test_subscriber_may_mutate_store(store):
    def dismiss_errors(state):
        for toast in state.toasts:
            if toast.variant == "error":
                store.remove(toast.id)

    store.subscribe(dismiss_errors)
    store.add("error", "Oops", duration_ms=0)
    store.add("info", "Fine", duration_ms=0)
    assert titles(store) == ["Fine"]


def test_later_subscribers_never_receive_superseded_state(store):
    def dismiss_errors(state):
        for toast in state.toasts:
            if toast.variant == "error":
                store.remove(toast.id)

    seen = []
    store.subscribe(dismiss_errors)
    store.subscribe(lambda state: seen.append(state.ids))
    store.add("error", "Oops", duration_ms=0)
    assert store.list() == []
    assert seen == [[]]
    assert seen[-1] == [t.id for t in store.list()]


def test_state_ids_follow_insertion_order(store):
    first = store.add("info", "A", duration_ms=0)
    second = store.add("info", "B", duration_ms=0)
    assert store.state.ids == [first, second]
    assert store.state.count == 2


def test_state_payload_carries_announcement(store):
    seen = []
    store.subscribe(seen.append)
    store.add("info", "A", duration_ms=0)
    store.add("error", "B", duration_ms=0)
    assert seen[0].announcement == "1 notification"
    assert seen[1].announcement == "2 notifications"
    assert seen[1].politeness == "assertive"
    assert store.announcement == "2 notifications"


def test_clear_removes_everything_with_single_notification(store, scheduler):
    store.add("info", "A", duration_ms=100)
    store.add("info", "B", duration_ms=0)
    seen = []
    store.subscribe(seen.append)
    assert store.clear() == 2
    assert store.list() == []
    assert len(seen) == 1 and seen[0].announcement == "No notifications"
    assert store.pending_timer_count == 0
    assert store.clear() == 0
    assert len(seen) == 1


def test_unknown_variant_and_empty_title_do_not_raise(store):
    tid = store.add("sparkly", "", duration_ms=0)
    assert store.get(tid).variant == "sparkly"


def test_negative_duration_is_clamped_to_persistent(store, scheduler, caplog):
    with caplog.at_level("WARNING", logger="toastqueue.services.toast_store"):
        tid = store.add("info", "Weird", duration_ms=-50)
    assert store.get(tid).duration_ms == 0
    assert store.pending_timer_count == 0
    assert any("clamped" in r.getMessage() for r in caplog.records)
    scheduler.advance(10_000)
    assert tid in store


def test_container_protocol(store):
    tid = store.add("info", "A", duration_ms=0)
    assert len(store) == 1
    assert tid in store
    assert [t.id for t in store] == [tid]


def test_independent_stores_do_not_share_ids(scheduler):
    first = ToastStore(scheduler, ToastSettings())
    second = ToastStore(scheduler, ToastSettings())
    assert first.add("info", "A", duration_ms=0) == "toast-1"
    assert second.add("info", "A", duration_ms=0) == "toast-1"
    assert first.add("info", "B", duration_ms=0) == "toast-2"
