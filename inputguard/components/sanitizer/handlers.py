"""
Inline event handler stripping.

Stage 1 removes anything shaped like a handler attribute (``on<word>=``)
until nothing matches. Stage 2 makes one more pass for bare ``on<event>``
tokens whose name is in EVENT_NAMES, which catches a handler name left
without its ``=``.

Words that merely begin with "on" (online, once, onboard) are left alone
unless they are followed by ``=``.
"""

from __future__ import annotations

import logging
import re

from .fixed_point import MAX_ITERATIONS, PassBudget, replace_until_stable

logger = logging.getLogger(__name__)

# Read-only, shared by every caller
EVENT_NAMES: frozenset[str] = frozenset(
    {
        # Mouse
        "auxclick",
        "click",
        "contextmenu",
        "dblclick",
        "mousedown",
        "mouseenter",
        "mouseleave",
        "mousemove",
        "mouseout",
        "mouseover",
        "mouseup",
        "mousewheel",
        "wheel",
        # Keyboard and input
        "beforeinput",
        "change",
        "input",
        "invalid",
        "keydown",
        "keypress",
        "keyup",
        "search",
        "select",
        "selectionchange",
        "selectstart",
        # Focus
        "blur",
        "focus",
        "focusin",
        "focusout",
        # Forms
        "formdata",
        "reset",
        "submit",
        # Clipboard
        "copy",
        "cut",
        "paste",
        # Drag and drop
        "drag",
        "dragend",
        "dragenter",
        "dragexit",
        "dragleave",
        "dragover",
        "dragstart",
        "drop",
        # Touch
        "touchcancel",
        "touchend",
        "touchmove",
        "touchstart",
        # Pointer
        "gotpointercapture",
        "lostpointercapture",
        "pointercancel",
        "pointerdown",
        "pointerenter",
        "pointerleave",
        "pointermove",
        "pointerout",
        "pointerover",
        "pointerrawupdate",
        "pointerup",
        # Document and window
        "afterprint",
        "beforeprint",
        "beforeunload",
        "error",
        "hashchange",
        "languagechange",
        "load",
        "message",
        "messageerror",
        "offline",
        "online",
        "pagehide",
        "pageshow",
        "popstate",
        "readystatechange",
        "resize",
        "scroll",
        "scrollend",
        "storage",
        "unhandledrejection",
        "unload",
        "visibilitychange",
        # Media
        "abort",
        "canplay",
        "canplaythrough",
        "cuechange",
        "durationchange",
        "emptied",
        "ended",
        "loadeddata",
        "loadedmetadata",
        "loadend",
        "loadstart",
        "pause",
        "play",
        "playing",
        "progress",
        "ratechange",
        "seeked",
        "seeking",
        "stalled",
        "suspend",
        "timeupdate",
        "volumechange",
        "waiting",
        # Animation and transition
        "animationcancel",
        "animationend",
        "animationiteration",
        "animationstart",
        "transitioncancel",
        "transitionend",
        "transitionrun",
        "transitionstart",
        # Elements
        "cancel",
        "close",
        "fullscreenchange",
        "fullscreenerror",
        "show",
        "slotchange",
        "toggle",
    }
)

HANDLER_ATTRIBUTE_RE = re.compile(r"\bon\w+\s*=", re.IGNORECASE)

# Longest names first, so "loadend" is tried before "load"
EVENT_NAME_RE = re.compile(
    r"\bon(?:"
    + "|".join(re.escape(name) for name in sorted(EVENT_NAMES, key=len, reverse=True))
    + r")\b",
    re.IGNORECASE,
)


def defang_handlers(text: str) -> str:
    """Remove every ``=``. No handler attribute can match afterwards."""
    return text.replace("=", "")


def strip_handler_attributes(
    text: str,
    *,
    max_iterations: int = MAX_ITERATIONS,
    budget: PassBudget | None = None,
) -> str:
    """
    Remove ``on<word>=`` tokens until none are left (stage 1).

    ``ononclick=`` goes in a single greedy match. Deeper nesting collapses
    over successive passes. Falls back to removing every ``=`` if the pass
    budget runs out first.
    """
    result = replace_until_stable(HANDLER_ATTRIBUTE_RE, text, max_iterations, budget=budget)
    if not result.converged:
        logger.warning(
            "Handler attributes still present after %d passes, defanging",
            result.passes,
        )
        return defang_handlers(result.text)
    return result.text


def strip_event_names(text: str) -> str:
    """Remove bare ``on<event>`` tokens for known event names (stage 2)."""
    return EVENT_NAME_RE.sub("", text)


def has_event_handler(text: str) -> bool:
    """Check for any handler attribute or known ``on<event>`` token."""
    return bool(HANDLER_ATTRIBUTE_RE.search(text) or EVENT_NAME_RE.search(text))


def strip_event_handlers(
    text: str,
    *,
    max_iterations: int = MAX_ITERATIONS,
    budget: PassBudget | None = None,
) -> str:
    """
    Remove inline event handlers from ``text``.

    Args:
        text: Text to clean.
        max_iterations: Pass cap for stage 1 when no budget is given.
        budget: Pass budget shared with the caller.

    Returns:
        Text with no handler attribute and no known ``on<event>`` token.
    """
    if not text:
        return ""
    stripped = strip_handler_attributes(text, max_iterations=max_iterations, budget=budget)
    return strip_event_names(stripped)
