from __future__ import annotations

from django import template

from participants.presentation import avatar_color as _avatar_color

register = template.Library()


@register.filter
def avatar_color(name):
    return _avatar_color(name)


@register.filter
def or_dash(value):
    if value is None or value == "" or value == []:
        return "—"
    return value


@register.filter
def join_events(participant):
    labels = participant.event_labels
    return ", ".join(labels) if labels else "—"
