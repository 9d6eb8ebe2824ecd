# Shared fixtures: a virtual-clock scheduler + store for headless queue tests,
# and a lazily created QApplication for the QTimer-backed scheduler tests.

import os
import sys

import pytest

from toastqueue import ToastSettings, ToastStore
from toastqueue.testing import VirtualScheduler


@pytest.fixture
def scheduler():
    return VirtualScheduler()


@pytest.fixture
def make_store(scheduler):
    created = []

    def factory(**settings_kwargs):
        store = ToastStore(scheduler, ToastSettings(**settings_kwargs))
        created.append(store)
        return store

    yield factory
    for store in created:
        store.dispose()


@pytest.fixture
def store(make_store):
    return make_store(max_toasts=3)


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    qt_widgets = pytest.importorskip("PyQt6.QtWidgets")
    QApplication = qt_widgets.QApplication
    return QApplication.instance() or QApplication(sys.argv)
