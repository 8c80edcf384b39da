"""
Suggestion rules for the time usage analysis

Each rule is an independent predicate -> message pair. Rules are evaluated
in the order of SUGGESTION_RULES and every rule whose predicate holds adds
one message.
"""
from dataclasses import dataclass
from typing import Callable, List, Sequence

from mindtrack.config.constants import (
    EXPECTED_WAKING_HOURS_PER_DAY,
    RECORD_MORE_THRESHOLD_RATIO,
    LEISURE_WARNING_PERCENTAGE,
    DOMINANT_ACTIVITY_RATIO,
)
from mindtrack.server.schemas.activity_schemas import ActivityTimeAggregate, AnalysisSummary


@dataclass(frozen=True)
class SuggestionRule:
    name: str
    applies: Callable[[List[ActivityTimeAggregate], AnalysisSummary], bool]
    message: Callable[[List[ActivityTimeAggregate], AnalysisSummary], str]


# ============================================================================
# Predicates
# ============================================================================

def too_little_recorded(aggregates: List[ActivityTimeAggregate], summary: AnalysisSummary) -> bool:
    """Recorded time is under half of the expected waking time of the range"""
    expected_minutes = EXPECTED_WAKING_HOURS_PER_DAY * 60 * summary.days_in_range
    return summary.total_recorded_minutes < expected_minutes * RECORD_MORE_THRESHOLD_RATIO


def leisure_heavy(aggregates: List[ActivityTimeAggregate], summary: AnalysisSummary) -> bool:
    return summary.leisure_percentage >= LEISURE_WARNING_PERCENTAGE


def dominant_activity(aggregates: List[ActivityTimeAggregate], summary: AnalysisSummary) -> bool:
    """The top activity takes more than half of the recorded time"""
    if not aggregates:
        return False
    return aggregates[0].total_minutes > summary.total_recorded_minutes * DOMINANT_ACTIVITY_RATIO


# ============================================================================
# Rule table
# ============================================================================

RECORD_MORE_RULE = SuggestionRule(
    name="record_more",
    applies=too_little_recorded,
    message=lambda aggregates, summary: "더 많은 활동을 기록하면 더 정확한 분석 결과를 얻을 수 있습니다.",
)

LEISURE_HEAVY_RULE = SuggestionRule(
    name="leisure_heavy",
    applies=leisure_heavy,
    message=lambda aggregates, summary: (
        f"여가 활동에 시간의 {summary.leisure_percentage}%를 사용하고 있습니다. "
        "생산적인 활동 시간을 늘려보세요."
    ),
)

DOMINANT_ACTIVITY_RULE = SuggestionRule(
    name="dominant_activity",
    applies=dominant_activity,
    message=lambda aggregates, summary: (
        f"{aggregates[0].name} 활동이 전체 시간의 50% 이상을 차지합니다. "
        "활동을 다양화하는 것이 좋습니다."
    ),
)

SUGGESTION_RULES = (
    RECORD_MORE_RULE,
    LEISURE_HEAVY_RULE,
    DOMINANT_ACTIVITY_RULE,
)


def generate_suggestions(
    aggregates: List[ActivityTimeAggregate],
    summary: AnalysisSummary,
    rules: Sequence[SuggestionRule] = SUGGESTION_RULES
) -> List[str]:
    """
    Evaluate the rules in order

    Args:
        aggregates: per-type totals sorted descending
        summary: summary of the same range
        rules: rules to evaluate

    Returns:
        List[str]: one message per matching rule
    """
    return [rule.message(aggregates, summary) for rule in rules if rule.applies(aggregates, summary)]
