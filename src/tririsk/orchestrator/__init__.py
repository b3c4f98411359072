from tririsk.orchestrator.evaluator import TriRiskEvaluator
from tririsk.orchestrator.fusion import aggregate, apply_ip_overrides, average_score, category_for_average

__all__ = ["TriRiskEvaluator", "aggregate", "apply_ip_overrides", "average_score", "category_for_average"]
