"""Report builders for performance, time, and executive summaries."""

from tracker_app.features.reports.builder import (
    REPORT_BUILDERS,
    build_recommendations,
    executive_report,
    format_timestamp,
    performance_report,
    report_filename,
    serialize_report,
    time_report,
    top_projects,
)

__all__ = [
    "REPORT_BUILDERS",
    "build_recommendations",
    "executive_report",
    "format_timestamp",
    "performance_report",
    "report_filename",
    "serialize_report",
    "time_report",
    "top_projects",
]
