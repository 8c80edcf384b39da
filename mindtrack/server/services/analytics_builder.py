"""
Analytics Builder - pure function module

Turns a list of activity records into the time usage analysis
(per-type totals, summary statistics and suggestions). Nothing here touches
the database; AnalyticsService feeds it with records.
"""

import math
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional, Sequence

from mindtrack.config.constants import DEFAULT_ACTIVITY_COLOR, DEFAULT_LEISURE_CATEGORIES
from mindtrack.server.schemas.activity_schemas import (
    ActivityTimeAggregate,
    AnalysisSummary,
    AnalysisResult,
)
from mindtrack.server.services.suggestion_rules import generate_suggestions
from mindtrack.utils import round_half_up


# ============================================================================
# Aggregation
# ============================================================================

def record_duration_minutes(record: Dict[str, Any]) -> float:
    return (record['end_time'] - record['start_time']).total_seconds() / 60


def aggregate_time_by_activity(
    records: Iterable[Dict[str, Any]],
    default_color: str = DEFAULT_ACTIVITY_COLOR
) -> List[ActivityTimeAggregate]:
    """
    Total time per activity type

    Args:
        records: dicts with activity_type_id, activity_type_name,
            activity_type_color, start_time, end_time
        default_color: color used when the type has none

    Returns:
        List[ActivityTimeAggregate]: sorted by total_minutes descending,
            ties keep the order in which the types were first seen
    """
    # activity_type_id -> {'total', 'name', 'color'}, insertion ordered
    totals: Dict[str, Dict[str, Any]] = {}

    for record in records:
        type_id = record['activity_type_id']
        if type_id not in totals:
            totals[type_id] = {
                'total': 0.0,
                'name': record['activity_type_name'],
                'color': record.get('activity_type_color') or default_color,
            }
        totals[type_id]['total'] += record_duration_minutes(record)

    aggregates = [
        ActivityTimeAggregate(
            id=type_id,
            name=data['name'],
            color=data['color'],
            total_minutes=round_half_up(data['total']),
            total_hours=round_half_up(data['total'] / 60, 1),
        )
        for type_id, data in totals.items()
    ]

    # sorted() is stable with reverse=True as well
    return sorted(aggregates, key=lambda item: item.total_minutes, reverse=True)


# ============================================================================
# Summary
# ============================================================================

def count_days_in_range(start_date: datetime, end_date: datetime) -> int:
    """Days covered by the range, rounded up; 0 or negative for empty ranges"""
    return math.ceil((end_date - start_date) / timedelta(days=1))


def build_summary(
    aggregates: List[ActivityTimeAggregate],
    start_date: datetime,
    end_date: datetime,
    leisure_categories: Optional[Sequence[str]] = None
) -> AnalysisSummary:
    """
    Summary statistics of the aggregates

    Args:
        aggregates: per-type totals
        start_date: range start
        end_date: range end
        leisure_categories: type names counted as leisure

    Returns:
        AnalysisSummary
    """
    if leisure_categories is None:
        leisure_categories = DEFAULT_LEISURE_CATEGORIES
    leisure_names = set(leisure_categories)

    total_minutes = sum(item.total_minutes for item in aggregates)
    leisure_minutes = sum(item.total_minutes for item in aggregates if item.name in leisure_names)

    leisure_percentage = 0
    if total_minutes > 0:
        leisure_percentage = round_half_up(leisure_minutes / total_minutes * 100)

    return AnalysisSummary(
        total_recorded_minutes=total_minutes,
        total_recorded_hours=round_half_up(total_minutes / 60, 1),
        leisure_minutes=leisure_minutes,
        leisure_percentage=leisure_percentage,
        days_in_range=count_days_in_range(start_date, end_date),
    )


# ============================================================================
# Time usage analysis
# ============================================================================

def build_time_usage_analysis(
    records: Iterable[Dict[str, Any]],
    start_date: datetime,
    end_date: datetime,
    leisure_categories: Optional[Sequence[str]] = None,
    default_color: str = DEFAULT_ACTIVITY_COLOR
) -> AnalysisResult:
    """
    Full analysis of the given records

    Args:
        records: records of the range (see aggregate_time_by_activity)
        start_date: range start
        end_date: range end
        leisure_categories: type names counted as leisure
        default_color: color used when a type has none

    Returns:
        AnalysisResult: zero-filled when there are no records
    """
    aggregates = aggregate_time_by_activity(records, default_color)
    summary = build_summary(aggregates, start_date, end_date, leisure_categories)

    return AnalysisResult(
        time_by_activity=aggregates,
        summary=summary,
        suggestions=generate_suggestions(aggregates, summary),
    )
