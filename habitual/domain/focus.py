"""Survey focus dimensions: pure function, no storage access.

Given every user's per-dimension averages for a survey, pick the five
dimensions a couple should focus on: the three lowest combined scores
plus the two highest.
"""

from typing import Any, Dict, List, Optional

from habitual.domain.models import FocusResult

LOWEST_COUNT = 3
HIGHEST_COUNT = 2


def compute_focus_dimensions(user_scores: Dict[str, Dict[str, Optional[float]]]) -> FocusResult:
    """Compute focus dimensions from {user_id: {dimension: average}}."""
    if not user_scores:
        return FocusResult(focus_dimensions=[], combined_scores={})

    # Dimension order follows first appearance across users
    all_dimensions: List[str] = []
    for scores in user_scores.values():
        for dim in scores:
            if dim not in all_dimensions:
                all_dimensions.append(dim)

    combined_scores: Dict[str, Dict[str, float]] = {}
    for dim in all_dimensions:
        entry: Dict[str, float] = {}
        present = []
        for user_id, scores in user_scores.items():
            score = scores.get(dim)
            if score is not None:
                entry[user_id] = score
                present.append(score)
        entry["combined"] = sum(present) / len(present) if present else 0
        combined_scores[dim] = entry

    ranked = sorted(combined_scores, key=lambda d: combined_scores[d]["combined"])
    lowest = ranked[:LOWEST_COUNT]
    highest = ranked[-HIGHEST_COUNT:]

    focus_dimensions: List[str] = []
    for dim in lowest + highest:
        if dim not in focus_dimensions:
            focus_dimensions.append(dim)

    return FocusResult(focus_dimensions=focus_dimensions, combined_scores=combined_scores)


def scores_from_responses(latest_by_user: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, float]]:
    """Build the user_scores map from each user's latest full survey response."""
    return {
        user_id: {
            score["dimension"]: score["average"]
            for score in response.get("scores", [])
        }
        for user_id, response in latest_by_user.items()
    }
