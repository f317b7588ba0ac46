"""Current simulation vs. static reference scenarios"""
from typing import Iterable, List

from .models import FinancialMetrics, ReferenceScenario

CURRENT_LABEL = "Current Sim"


def comparison_rows(metrics: FinancialMetrics, scenarios: Iterable[ReferenceScenario]) -> List[dict]:
    """Current simulation first, then the reference scenarios unchanged"""
    rows = [{
        "label": CURRENT_LABEL,
        "monthly_revenue": metrics.monthly_revenue,
        "monthly_ebitda": metrics.monthly_ebitda,
        "is_current": True,
    }]
    for s in scenarios:
        rows.append({
            "label": s.label,
            "monthly_revenue": s.monthly_revenue,
            "monthly_ebitda": s.monthly_ebitda,
            "is_current": False,
        })
    return rows
