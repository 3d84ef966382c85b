from __future__ import annotations

import logging

from charinfo_mode.host import EvalDirective
from charinfo_mode.rendering import RenderedSegment, render_display_list, render_plain


def test_literals_and_directives_render_in_order() -> None:
    elements = [" ", EvalDirective("name"), 42, EvalDirective("missing"), None, "!"]
    segments = render_display_list(elements, {"name": lambda: "buf"})

    assert [segment.text for segment in segments] == [" ", "buf", "42", "!"]
    assert render_plain(segments) == " buf42!"


def test_provider_segments_keep_tooltip_and_click() -> None:
    clicks: list[object] = []
    segment = RenderedSegment(" [U+0061]", tooltip="LATIN SMALL LETTER A", on_click=clicks.append, link_span=(2, 8))

    segments = render_display_list([EvalDirective("char_info")], {"char_info": lambda: segment})

    assert segments == [segment]
    segments[0].on_click("surface")
    assert clicks == ["surface"]


def test_empty_and_none_provider_results_are_dropped() -> None:
    elements = [EvalDirective("empty"), EvalDirective("none"), ""]

    assert render_display_list(elements, {"empty": lambda: "", "none": lambda: None}) == []


def test_failing_provider_is_skipped(caplog) -> None:
    def _boom() -> str:
        raise RuntimeError("boom")

    logger = logging.getLogger("charinfo-test-render")
    with caplog.at_level(logging.DEBUG, logger="charinfo-test-render"):
        segments = render_display_list(["a", EvalDirective("boom"), "b"], {"boom": _boom}, logger=logger)

    assert render_plain(segments) == "ab"
    assert any("boom" in record.getMessage() for record in caplog.records)
