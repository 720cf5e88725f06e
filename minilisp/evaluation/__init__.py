from minilisp.evaluation.evaluator import evaluate
from minilisp.evaluation.pure import evaluate_pure, evaluate_text

__all__ = ["evaluate", "evaluate_pure", "evaluate_text"]
