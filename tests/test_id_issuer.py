from toastqueue import IdIssuer


def test_sequential_ids():
    issuer = IdIssuer()
    assert [issuer.next_id() for _ in range(3)] == ["toast-1", "toast-2", "toast-3"]
    assert issuer.issued_count == 3


def test_reset_restores_start():
    issuer = IdIssuer(prefix="n-", start=10)
    issuer.next_id()
    issuer.next_id()
    issuer.reset()
    assert issuer.peek() == "n-10"
    assert issuer.next_id() == "n-10"


def test_store_reset_ids_matches_fresh_store(store, make_store):
    store.add("info", "A", duration_ms=0)
    store.add("info", "B", duration_ms=0)
    store.clear()
    store.reset_ids()
    fresh = make_store(max_toasts=3)
    expected = [fresh.add("info", "x", duration_ms=0) for _ in range(2)]
    assert [store.add("info", "x", duration_ms=0) for _ in range(2)] == expected
    assert expected == ["toast-1", "toast-2"]


def test_reset_ids_skips_active_ids(store):
    store.add("info", "A", duration_ms=0)  # toast-1 stays active
    store.reset_ids()
    tid = store.add("info", "B", duration_ms=0)
    assert tid == "toast-2"
    assert len({t.id for t in store.list()}) == 2


def test_custom_prefix_from_settings(make_store):
    store = make_store(id_prefix="note-")
    assert store.add("info", "A", duration_ms=0) == "note-1"
