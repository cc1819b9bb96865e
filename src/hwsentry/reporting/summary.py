"""
Summary report rendering.

The summary report combines the stress-test results, the alert list, a chart
of the temperature readings against their thresholds and the full reading
tables taken before and after the stress tests. Rendering is pure: the
functions here only build strings.
"""

from html import escape
from typing import List, Sequence

import pandas as pd
import plotly.graph_objects as go

from ..models.results import StressOutcome
from ..models.sensors import SensorKind, SensorReading
from .page import render_page

READING_COLUMNS = ["Sensor", "Kind", "Value", "Unit", "Threshold", "Reported"]
STRESS_COLUMNS = ["Component", "Status", "Metric"]


def readings_frame(readings: Sequence[SensorReading]) -> pd.DataFrame:
    """Tabulate readings, one row each, in reading order."""
    rows = [
        {
            "Sensor": r.name,
            "Kind": r.kind.value,
            "Value": r.value,
            "Unit": r.unit,
            "Threshold": r.max,
            "Reported": r.raw_value,
        }
        for r in readings
    ]
    return pd.DataFrame(rows, columns=READING_COLUMNS)


def _table_html(frame: pd.DataFrame) -> str:
    if frame.empty:
        return '<p class="meta">No data.</p>'
    return frame.to_html(index=False, na_rep="n/a", border=0, classes="data", escape=True)


def _stress_table_html(outcome: StressOutcome) -> str:
    rows = []
    for result in outcome.results:
        metric = "n/a" if result.metric is None else f"{result.metric:.2f}"
        status = escape(result.status.value)
        rows.append(
            f"<tr><td>{escape(result.component.value)}</td>"
            f'<td class="status-{status}">{status}</td>'
            f"<td>{metric}</td></tr>"
        )
    header = "".join(f"<th>{column}</th>" for column in STRESS_COLUMNS)
    return (
        f'<table class="data"><thead><tr>{header}</tr></thead>'
        f"<tbody>{''.join(rows)}</tbody></table>"
    )


def _alerts_html(alerts: Sequence[str]) -> str:
    if not alerts:
        return '<p class="all-clear">No alerts: all readings within limits and all stress tests completed.</p>'
    items = "".join(f"<li>{escape(alert)}</li>" for alert in alerts)
    return f'<ul class="alerts">{items}</ul>'


def temperature_figure(readings: Sequence[SensorReading]) -> go.Figure:
    """Bar chart of temperature readings with their thresholds as markers."""
    temperatures = [r for r in readings if r.kind is SensorKind.TEMPERATURE]
    names = [r.name for r in temperatures]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=names,
            y=[r.value for r in temperatures],
            name="Temperature (°C)",
            marker_color=[
                "indianred" if r.max is not None and r.value > r.max else "cornflowerblue"
                for r in temperatures
            ],
            text=[f"{r.value:.1f}" for r in temperatures],
            textposition="auto",
        )
    )
    with_threshold = [r for r in temperatures if r.max is not None]
    if with_threshold:
        fig.add_trace(
            go.Scatter(
                x=[r.name for r in with_threshold],
                y=[r.max for r in with_threshold],
                name="Threshold (°C)",
                mode="markers",
                marker=dict(symbol="line-ew-open", size=24, color="black"),
            )
        )
    fig.update_layout(
        title_text="Temperatures after stress tests",
        xaxis=dict(title_text="Sensor", type="category"),
        yaxis=dict(title_text="°C"),
        legend=dict(x=0.01, y=0.98, bordercolor="Black", borderwidth=1),
        height=450,
    )
    return fig


def _chart_html(readings: Sequence[SensorReading]) -> str:
    if not any(r.kind is SensorKind.TEMPERATURE for r in readings):
        return '<p class="meta">No temperature readings to chart.</p>'
    return temperature_figure(readings).to_html(full_html=False, include_plotlyjs="cdn")


def render_summary_report(
    timestamp: str,
    source_url: str,
    readings_before: Sequence[SensorReading],
    readings_after: Sequence[SensorReading],
    outcome: StressOutcome,
    alerts: List[str],
) -> str:
    """
    Render the summary report as a complete HTML document.

    Args:
        timestamp: Run timestamp shown in the header
        source_url: Sensor endpoint the readings came from
        readings_before: Snapshot taken before the stress tests
        readings_after: Snapshot taken after the stress tests
        outcome: Stress orchestrator outcome
        alerts: Alert list, reading alerts first

    Returns:
        The HTML document
    """
    sections = [
        f'<p class="meta">Run {escape(timestamp)} &middot; source {escape(source_url)} &middot; '
        f"{len(readings_after)} sensors</p>",
        f"<h2>Alerts ({len(alerts)})</h2>",
        _alerts_html(alerts),
        "<h2>Stress tests</h2>",
        _stress_table_html(outcome),
        "<h2>Temperatures</h2>",
        _chart_html(readings_after),
        "<h2>Readings after stress tests</h2>",
        _table_html(readings_frame(readings_after)),
        "<h2>Readings before stress tests</h2>",
        _table_html(readings_frame(readings_before)),
    ]
    return render_page("Hardware Stress Test Report", "\n".join(sections))
