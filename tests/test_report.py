"""Tests for palette_checker.core.report: text and JSON summaries."""

import json

from palette_checker.core.report import TEXT_COLOUR_LIMIT, format_json, format_text
from palette_checker.core.types import FilterReport


def _report(**kwargs) -> FilterReport:
    defaults = {
        'palette_path': 'palette.png',
        'picture_path': 'picture.png',
        'output_path': 'out.png',
        'width': 2,
        'height': 2,
        'palette_colours': 1,
        'marking': '#000000ff',
        'replaced': 2,
        'foreign_colours': ['#0000ffff', '#00ff00ff'],
    }
    defaults.update(kwargs)
    return FilterReport(**defaults)


class TestFilterReport:
    def test_total(self):
        assert _report(width=3, height=5).total == 15

    def test_replaced_pct(self):
        assert _report().replaced_pct == 50.0

    def test_replaced_pct_empty_picture(self):
        assert _report(width=0, height=0, replaced=0).replaced_pct == 0.0


class TestFormatText:
    def test_header(self):
        text = format_text(_report())
        first = text.splitlines()[0]
        assert 'picture.png (2×2)' in first
        assert 'palette.png (1 colours)' in first

    def test_counts(self):
        text = format_text(_report())
        assert 'marked 2/4 pixels (50.0%) with #000000ff' in text
        assert '✗' in text

    def test_clean_picture_tick(self):
        text = format_text(_report(replaced=0, foreign_colours=[]))
        assert '✓' in text
        assert 'foreign colours' not in text

    def test_foreign_colours_truncated(self):
        colours = [f'#0000{i:02x}ff' for i in range(TEXT_COLOUR_LIMIT + 3)]
        text = format_text(_report(foreign_colours=colours))
        assert '(+3 more)' in text
        assert colours[-1] not in text

    def test_output_path(self):
        assert format_text(_report()).endswith('wrote out.png')


class TestFormatJson:
    def test_structure(self):
        obj = json.loads(format_json(_report()))
        assert obj['dimensions'] == {'width': 2, 'height': 2}
        assert obj['summary'] == {'total': 4, 'replaced': 2, 'replaced_pct': 50.0}
        assert obj['foreign_colours'] == ['#0000ffff', '#00ff00ff']
        assert obj['output'] == 'out.png'
        assert obj['marking'] == '#000000ff'
