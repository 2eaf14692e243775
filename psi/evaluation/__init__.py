from psi.evaluation.evaluator import evaluate, BuiltinTable

__all__ = ["evaluate", "BuiltinTable"]
