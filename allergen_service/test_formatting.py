"""Tests for bold-run splitting and bubble rendering."""

from allergen_service.formatting import (
    Run,
    render_loading,
    render_markup,
    render_message,
    render_transcript,
    split_bold_runs,
)
from allergen_service.models import ErrorMessage, ImageMessage, TextMessage
from allergen_service.prompts import LOADING_TEXT


def _joined(runs):
    return "".join(run.text for run in runs)


# --------------- split_bold_runs ---------------

def test_bold_in_the_middle():
    runs = split_bold_runs("A **B** C")
    assert runs == [Run("A ", False), Run("B", True), Run(" C", False)]
    assert _joined(runs) == "A B C"


def test_plain_text_is_one_run():
    assert split_bold_runs("just text") == [Run("just text", False)]


def test_empty_string_has_no_runs():
    assert split_bold_runs("") == []


def test_bold_at_edges_and_adjacent():
    runs = split_bold_runs("**Pad Thai****Ramen** rocks")
    assert runs == [Run("Pad Thai", True), Run("Ramen", True), Run(" rocks", False)]


def test_unpaired_marker_stays_literal():
    runs = split_bold_runs("**Cross-contamination:** high **risk")
    assert runs == [Run("Cross-contamination:", True), Run(" high **risk", False)]


def test_pair_split_by_newline_stays_literal():
    text = "Dish\n**Allergens\nbelow**\n• peanuts"
    runs = split_bold_runs(text)
    assert runs == [Run(text, False)]
    assert _joined(runs) == text


def test_bold_pairs_on_separate_lines():
    runs = split_bold_runs("**Pad Thai**\n• peanuts\n**Ramen**")
    assert runs == [Run("Pad Thai", True), Run("\n• peanuts\n", False), Run("Ramen", True)]


def test_markup_keeps_line_breaks_when_pair_spans_lines():
    html = render_markup("**Pad Thai\nAllergens**\n• peanuts")
    assert "<strong>" not in html
    assert "\n" not in html
    assert html == "**Pad Thai<br>Allergens**<br>• peanuts"


# --------------- render_markup ---------------

def test_markup_bolds_and_breaks_lines():
    html = render_markup("**Pad Thai**\n• peanuts\n• egg")
    assert html == "<strong>Pad Thai</strong><br>• peanuts<br>• egg"


def test_markup_escapes_html():
    assert render_markup("<b>fish & chips</b>") == "&lt;b&gt;fish &amp; chips&lt;/b&gt;"


def test_error_markup_is_wrapped():
    assert render_markup("oops", is_error=True) == '<span class="error">oops</span>'


# --------------- render_message ---------------

def test_render_image_message():
    html = render_message(ImageMessage(image_url="data:image/png;base64,AAAA"))
    assert html.startswith('<img src="data:image/png;base64,AAAA"')
    assert 'alt="Uploaded menu image thumbnail"' in html


def test_render_text_and_error_messages():
    assert render_message(TextMessage(text="**hi**", sender="bot")) == "<strong>hi</strong>"
    assert render_message(ErrorMessage(text="no")) == '<span class="error">no</span>'


# --------------- render_transcript ---------------

class _Transcript:
    def __init__(self, messages, loading):
        self.messages = messages
        self.loading = loading


def test_loading_bubble_only_while_loading():
    messages = [TextMessage(text="Ramen", sender="user")]
    assert render_transcript(_Transcript(messages, loading=True)).endswith(render_loading())
    assert LOADING_TEXT not in render_transcript(_Transcript(messages, loading=False))


def test_transcript_marks_sides():
    html = render_transcript(_Transcript([TextMessage(text="Ramen", sender="user"), ErrorMessage(text="no")], False))
    assert html == '<div class="bubble user">Ramen</div>\n<div class="bubble bot"><span class="error">no</span></div>'
