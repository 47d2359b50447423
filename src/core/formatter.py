"""Presentation helpers - Pure functions.

Merges predictions with observed events, applies the free-text location
search and renders list rows and text reports.
"""

from datetime import timezone

from src.core.event import Event
from src.core.prediction import summarize_predictions


PREDICTED_MARKER = "[PREDICTED]"


def get_severity_label(magnitude: float) -> str:
    """Get a human-readable severity label.

    Pure function.
    """
    if magnitude >= 8.0:
        return "Great"
    elif magnitude >= 7.0:
        return "Major"
    elif magnitude >= 6.0:
        return "Strong"
    elif magnitude >= 5.0:
        return "Moderate"
    elif magnitude >= 4.0:
        return "Light"
    elif magnitude >= 3.0:
        return "Minor"
    else:
        return "Micro"


def merge_with_predictions(
    observed: list[Event],
    predictions: list[Event],
) -> list[Event]:
    """Combine events for display: predictions first, then observed.

    Pure function. Neither input list is modified.
    """
    return [*predictions, *observed]


def filter_by_search(events: list[Event], query: str | None) -> list[Event]:
    """Keep events whose location contains the query, ignoring case.

    Pure function. An empty or missing query returns the input unchanged.
    """
    if not query:
        return events

    needle = query.strip().lower()
    if not needle:
        return events

    return [e for e in events if needle in e.location.lower()]


def format_event_row(event: Event) -> str:
    """Format one list row for an event.

    Pure function.

    Args:
        event: Event to format

    Returns:
        Single-line row, marked when the event is predicted
    """
    time_str = event.time.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    row = (
        f"M{event.magnitude:.1f}  {event.location}  "
        f"{event.depth_km:.1f} km  {event.alert_level}  {time_str}"
    )
    if event.is_predicted:
        return f"{PREDICTED_MARKER} {row}"
    return row


def format_prediction_report(
    observed: list[Event],
    predictions: list[Event],
) -> str:
    """Format a plain-text report of observed events and predictions.

    Pure function.
    """
    summary = summarize_predictions(predictions)
    lines = [
        f"Observed events: {len(observed)}",
        (
            f"Predictions: {summary['total']} "
            f"({summary['aftershock']} aftershock, "
            f"{summary['gap']} gap, {summary['swarm']} swarm)"
        ),
        "",
    ]

    if predictions:
        lines.append("Predicted events:")
        lines.extend(f"  {format_event_row(e)}" for e in predictions)
        lines.append("")

    if observed:
        lines.append("Observed events:")
        lines.extend(
            f"  {format_event_row(e)} ({get_severity_label(e.magnitude)})"
            for e in observed
        )

    return "\n".join(lines).rstrip() + "\n"
