from __future__ import annotations

import pytest

from participants.controller import InFlightGuard, ReviewController
from participants.tests.fakes import FakeNotifier, FakeStore, ToastRecorder, make_doc


@pytest.fixture
def docs():
    return [
        make_doc("a@x.com", "Jane Doe", company="Green Harvest Foods"),
        make_doc("marco@island.ph", "Marco Santos", company="Island Feeds"),
        make_doc("liza@agripack.ph", "Liza Reyes", company="AgriPack", approved=True),
        make_doc("paolo@coldchain.ph", "Paolo Cruz", company="ColdChain", rejected=True),
    ]


@pytest.fixture
def store(docs):
    return FakeStore(docs)


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def toasts():
    return ToastRecorder()


@pytest.fixture
def guard():
    return InFlightGuard()


@pytest.fixture
def controller(store, notifier, toasts, guard):
    ctrl = ReviewController(store, notifier, toast=toasts, guard=guard)
    ctrl.load()
    return ctrl
