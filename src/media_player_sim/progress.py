"""
Per-cycle progress output
"""

BAR_SEGMENTS = 20
FILLED = "█"
EMPTY = "░"


def render_progress_bar(percentage: float, segments: int = BAR_SEGMENTS) -> str:
    # One segment per 5% at the default width
    filled = int(percentage / (100.0 / segments))
    filled = max(0, min(segments, filled))
    return FILLED * filled + EMPTY * (segments - filled)


def format_progress_line(current_cycle: int, total_cycles: int,
                         processing_time_ms: float, efficiency_rating: float) -> str:
    completion = (current_cycle / total_cycles) * 100.0
    return (
        f"[Processing Cycle {current_cycle:2d}/{total_cycles}] "
        f"[{render_progress_bar(completion)}] {completion:.1f}%"
        f" | Processing Time: {processing_time_ms:.2f}ms"
        f" | Efficiency: {efficiency_rating:.3f}"
    )


def display_progress_visualization(current_cycle: int, total_cycles: int,
                                   processing_time_ms: float, efficiency_rating: float) -> None:
    """Print one progress line for a completed cycle."""
    print(format_progress_line(current_cycle, total_cycles, processing_time_ms, efficiency_rating))
