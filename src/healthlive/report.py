"""Plain-text rendering of a DashboardSummary for the terminal."""

from __future__ import annotations

from healthlive.analytics.daily import NormalizedDay
from healthlive.analytics.summary import DashboardSummary

NA = "N/A"
GAP = "—"

TABLE_COLUMNS = [
    ("Date", "date"),
    ("HRV", "hrv"),
    ("RHR", "rhr"),
    ("Sleep (h)", "sleep_hours"),
    ("Steps", "steps"),
    ("Load", "training_load"),
    ("SpO₂", "spo2"),
    ("Resp.", "respiratory_rate"),
    ("Temp", "temperature"),
]


def _fixed(value: float | None, suffix: str = "") -> str:
    return f"{value:.2f}{suffix}" if value is not None else NA


def format_cards(summary: DashboardSummary) -> list[str]:
    """Summary card lines for the latest day."""
    s = summary.latest
    alerts = ", ".join(s.alerts) if s.alerts else "None"
    return [
        f"  Recovery:     {f'{s.recovery_score}%' if s.recovery_score is not None else NA}",
        f"  Exertion:     {s.exertion_score if s.exertion_score is not None else NA}",
        f"  Target zone:  {s.target_zone.value if s.target_zone else NA}",
        f"  Sleep:        {s.sleep_quality.value if s.sleep_quality else NA}",
        f"  Sleep debt:   {_fixed(s.sleep_debt_hours, 'h')}",
        f"  Target sleep: {_fixed(s.target_sleep_hours, 'h')}",
        f"  Alerts:       {alerts}",
    ]


def _cell(row: NormalizedDay, attr: str) -> str:
    value = getattr(row, attr)
    if attr == "date":
        return value or GAP
    if value is None:
        return GAP
    if attr == "steps" and float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def format_table(rows: list[NormalizedDay]) -> list[str]:
    """Fixed-width table of normalized rows, one line per entry."""
    cells = [[_cell(r, attr) for _, attr in TABLE_COLUMNS] for r in rows]
    widths = [
        max([len(header)] + [len(c[i]) for c in cells])
        for i, (header, _) in enumerate(TABLE_COLUMNS)
    ]
    header = "  ".join(h.rjust(w) for (h, _), w in zip(TABLE_COLUMNS, widths))
    lines = [header, "  ".join("-" * w for w in widths)]
    for c in cells:
        lines.append("  ".join(v.rjust(w) for v, w in zip(c, widths)))
    return lines


def format_summary(summary: DashboardSummary, show_table: bool = True) -> str:
    """Render cards (and optionally the metrics table) as one string."""
    lines = [
        "=" * 60,
        f"  Health Dashboard: {summary.latest_date or NA} ({len(summary.rows)} entries)",
        "=" * 60,
    ]
    lines.extend(format_cards(summary))
    lines.append("=" * 60)
    if show_table and summary.rows:
        lines.append("")
        lines.extend(format_table(summary.rows))
    return "\n".join(lines)
