from __future__ import annotations

import logging
from typing import Any, Dict

from django.contrib import messages
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_protect
from django.views.decorators.http import require_GET, require_POST

from participants.controller import APPROVE, REJECT, ReviewController
from participants.notifications import EmailNotifier
from participants.presentation import action_area_state, pick_loader_color
from participants.store import ParticipantStore

logger = logging.getLogger(__name__)

SELECTED_SESSION_KEY = "selected_email"
SEARCH_SESSION_KEY = "search_term"
REFRESH_EVENT = "participants-refresh"


def get_store() -> ParticipantStore:
    return ParticipantStore.from_settings()


def get_notifier() -> EmailNotifier:
    return EmailNotifier.from_settings()


def _toaster(request: HttpRequest):
    def toast(level: str, text: str) -> None:
        getattr(messages, level, messages.info)(request, text)

    return toast


def _controller(request: HttpRequest) -> ReviewController:
    controller = ReviewController(get_store(), get_notifier(), toast=_toaster(request))
    if "q" in request.GET:
        controller.set_search(request.GET.get("q"))
        request.session[SEARCH_SESSION_KEY] = controller.search_term
    else:
        controller.set_search(request.session.get(SEARCH_SESSION_KEY, ""))
    controller.load()
    return controller


def _table_context(controller: ReviewController) -> Dict[str, Any]:
    selected = controller.selected
    return {
        "rows": controller.filtered_participants,
        "total": len(controller.participants),
        "q": controller.search_term,
        "selected_email": selected.email if selected else "",
    }


def _panel_context(controller: ReviewController) -> Dict[str, Any]:
    selected = controller.selected
    if selected is None:
        return {"selected": None}
    # Another request may still be mutating this record
    pending = controller.guard.action_for(selected.email)
    approving = controller.approving or pending == APPROVE
    rejecting = controller.rejecting or pending == REJECT
    return {
        "selected": selected,
        "approving": approving,
        "rejecting": rejecting,
        "action_state": action_area_state(selected, approving, rejecting),
        "loader_color": pick_loader_color(),
    }


def _render_panel(request: HttpRequest, controller: ReviewController, refresh: bool = False) -> HttpResponse:
    resp = render(request, "participants/partials/participant_detail.html", _panel_context(controller))
    if refresh:
        # The table only needs re-fetching after a decision changed a row
        resp["HX-Trigger"] = REFRESH_EVENT
    return resp


def _select_or_404(controller: ReviewController, email: str):
    participant = controller.select(email)
    if participant is None:
        logger.warning("Unknown participant requested: %s", email)
        raise Http404("Participant not found")
    return participant


@require_GET
def dashboard(request: HttpRequest):
    controller = _controller(request)
    controller.select(request.session.get(SELECTED_SESSION_KEY))
    ctx = _table_context(controller)
    ctx.update(_panel_context(controller))
    return render(request, "participants/dashboard.html", ctx)


@require_GET
def participants_partial(request: HttpRequest):
    # HTMX partial for the table only
    controller = _controller(request)
    controller.select(request.session.get(SELECTED_SESSION_KEY))
    return render(request, "participants/partials/participants_table.html", _table_context(controller))


@require_GET
def participant_detail(request: HttpRequest):
    controller = _controller(request)
    participant = _select_or_404(controller, request.GET.get("email", ""))
    request.session[SELECTED_SESSION_KEY] = participant.email
    return _render_panel(request, controller)


@csrf_protect
@require_POST
def participant_approve(request: HttpRequest):
    controller = _controller(request)
    participant = _select_or_404(controller, request.POST.get("email", ""))
    request.session[SELECTED_SESSION_KEY] = participant.email
    controller.approve()
    return _render_panel(request, controller, refresh=True)


@csrf_protect
@require_POST
def participant_reject(request: HttpRequest):
    controller = _controller(request)
    participant = _select_or_404(controller, request.POST.get("email", ""))
    request.session[SELECTED_SESSION_KEY] = participant.email
    controller.reject()
    return _render_panel(request, controller, refresh=True)
