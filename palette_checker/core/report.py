"""Report builder: text and JSON output for palette-check results."""

import json
from typing import Any

from palette_checker.core.types import FilterReport

# Foreign colours listed in text output; JSON always lists all of them
TEXT_COLOUR_LIMIT = 8


def format_text(report: FilterReport) -> str:
    """Format report as human-readable text."""
    lines = []
    dim = f'{report.width}\u00d7{report.height}'
    header = f'palette-check: {report.picture_path} ({dim})'
    lines.append(f'{header} \u2014 {report.palette_path} ({report.palette_colours} colours)')
    lines.append('')

    mark = '\u2713' if report.replaced == 0 else '\u2717'
    lines.append(
        f'  marked {report.replaced}/{report.total} pixels ({report.replaced_pct:.1f}%) with {report.marking}  {mark}'
    )
    if report.foreign_colours:
        shown = report.foreign_colours[:TEXT_COLOUR_LIMIT]
        more = len(report.foreign_colours) - len(shown)
        suffix = f' (+{more} more)' if more > 0 else ''
        lines.append(f'  foreign colours: {", ".join(shown)}{suffix}')
    lines.append(f'  wrote {report.output_path}')
    return '\n'.join(lines)


def format_json(report: FilterReport) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'palette': report.palette_path,
        'picture': report.picture_path,
        'output': report.output_path,
        'dimensions': {'width': report.width, 'height': report.height},
        'palette_colours': report.palette_colours,
        'marking': report.marking,
        'foreign_colours': report.foreign_colours,
        'summary': {
            'total': report.total,
            'replaced': report.replaced,
            'replaced_pct': report.replaced_pct,
        },
    }
    return json.dumps(obj, indent=2)
