"""HTML scoring report generation.

The report is rewritten after every run: score, passed checks, triggered
penalties, and the run status.  A run that never connected to its remote
server produces a blank report carrying only the status line.
"""

from __future__ import annotations

import html
import logging
from datetime import datetime
from pathlib import Path

from scorekeeper.config.defaults import OUTPUT_DEFAULTS
from scorekeeper.engine.models import RunStatus, ScoreItem, ScoreState

logger = logging.getLogger(__name__)

_STATUS_COLORS = {
    "green": "#228B22",
    "red": "#B22222",
}


def _item_rows(items: list[ScoreItem]) -> list[str]:
    return [
        f"<tr><td>{html.escape(item.message)}</td><td>{item.points:+d}</td></tr>"
        for item in items
    ]


def build_report(
    state: ScoreState,
    status: RunStatus,
    title: str = "Scoring Report",
    connected: bool = True,
) -> str:
    """Render a ScoreState as an HTML page.

    Parameters:
        state: Finished (or blank) ScoreState.
        status: Configuration/connection status for the banner line.
        title: Page heading, usually the image title from config.
        connected: False renders a blank report with the status only.

    Returns:
        The HTML document as a string.
    """
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    color = _STATUS_COLORS.get(status.color, status.color)

    parts: list[str] = []
    parts.append("<html><head><meta charset='utf-8'>")
    parts.append(f"<title>{html.escape(title)}</title></head><body>")
    parts.append(f"<h2>{html.escape(title)}</h2>")
    parts.append(f"<p>Report generated at {timestamp}</p>")
    parts.append(
        f"<p style='color:{color}'><b>Status:</b> {html.escape(status.message)}</p>"
    )

    if not connected:
        parts.append("<p>No scoring data available.</p>")
        parts.append("</body></html>")
        return "\n".join(parts)

    parts.append(f"<h3>{state.score} out of {state.total_points} points received</h3>")
    parts.append(
        f"<p>{len(state.points)} out of {state.scored_vulns} "
        f"scored security issues fixed, for a gain of {state.contribs} points</p>"
    )

    if state.penalties:
        parts.append(
            f"<h3>Penalties ({len(state.penalties)}), "
            f"for a loss of {abs(state.detracts)} points</h3>"
        )
        parts.append("<table border='1' cellpadding='4' cellspacing='0'>")
        parts.append("<tr><th>Penalty</th><th>Points</th></tr>")
        parts.extend(_item_rows(state.penalties))
        parts.append("</table>")

    if state.points:
        parts.append("<h3>Fixed Vulnerabilities</h3>")
        parts.append("<table border='1' cellpadding='4' cellspacing='0'>")
        parts.append("<tr><th>Check</th><th>Points</th></tr>")
        parts.extend(_item_rows(state.points))
        parts.append("</table>")
    else:
        parts.append("<p>No vulnerabilities fixed yet.</p>")

    parts.append("</body></html>")
    return "\n".join(parts)


def write_report(
    body_html: str,
    output_dir: str | Path,
    filename: str = OUTPUT_DEFAULTS["report_file"],
) -> Path:
    """Write the report into ``output_dir``, returning its path."""
    output_dir = Path(output_dir).expanduser()
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    path.write_text(body_html, encoding="utf-8")
    logger.info("Report written to %s", path)
    return path
