__all__ = [
    "DEFAULT_WEIGHTS",
    "RankedCandidate",
    "ScoreBreakdown",
    "ScoringMode",
    "ScoringWeights",
    "axis_closeness",
    "explain_ranking",
    "normalize_requirements",
    "rank",
    "score",
    "score_breakdown",
    "to_percent",
]

# Lazy: catalog.models imports scoring._constants, so the package itself must not
# pull in engine at import time.
def __getattr__(name: str):
    if name == "explain_ranking":
        from .explain import explain_ranking

        return explain_ranking
    if name in __all__:
        from . import engine

        return getattr(engine, name)
    raise AttributeError(name)
