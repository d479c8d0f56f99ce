"""Turns bot replies into bold/plain runs and chat-bubble HTML."""

import html
import re
from typing import List, NamedTuple

from allergen_service.models import Message
from allergen_service.prompts import LOADING_TEXT

_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")

IMAGE_ALT = "Uploaded menu image thumbnail"


class Run(NamedTuple):
    text: str
    bold: bool


def split_bold_runs(text: str) -> List[Run]:
    """
    Split ``text`` on ``**...**`` pairs that open and close on the same line.

    Joining every run's text gives back the input minus the paired ``**``
    markers. An unpaired ``**``, or a pair split by a newline, stays literal.
    """
    runs = []
    pos = 0
    for match in _BOLD_RE.finditer(text):
        if match.start() > pos:
            runs.append(Run(text[pos:match.start()], False))
        runs.append(Run(match.group(1), True))
        pos = match.end()
    if pos < len(text):
        runs.append(Run(text[pos:], False))
    return runs


def render_markup(text: str, is_error: bool = False) -> str:
    parts = []
    for run in split_bold_runs(text):
        escaped = html.escape(run.text)
        if run.bold:
            parts.append(f"<strong>{escaped}</strong>")
        else:
            parts.append(escaped.replace("\n", "<br>"))
    markup = "".join(parts)
    if is_error:
        return f'<span class="error">{markup}</span>'
    return markup


def render_message(message: Message) -> str:
    if message.is_image:
        return f'<img src="{html.escape(message.image_url)}" alt="{IMAGE_ALT}" class="thumbnail">'
    return render_markup(message.text, is_error=message.is_error)


def render_loading() -> str:
    return f'<div class="bubble bot loading">{html.escape(LOADING_TEXT)}</div>'


def render_transcript(session) -> str:
    """Every message as a bubble, plus the loading bubble while a reply is pending."""
    bubbles = []
    for message in session.messages:
        side = "user" if message.is_user else "bot"
        bubbles.append(f'<div class="bubble {side}">{render_message(message)}</div>')
    if session.loading:
        bubbles.append(render_loading())
    return "\n".join(bubbles)
