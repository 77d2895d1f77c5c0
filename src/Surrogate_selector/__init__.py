__all__ = [
    "DEFAULT_CATALOG",
    "RequirementInput",
    "ScoringMode",
    "explain_ranking",
    "rank",
    "score",
]

def __getattr__(name: str):
    if name in __all__:
        from .catalog import DEFAULT_CATALOG, RequirementInput
        from .scoring.engine import ScoringMode, rank, score
        from .scoring.explain import explain_ranking

        return {
            "DEFAULT_CATALOG": DEFAULT_CATALOG,
            "RequirementInput": RequirementInput,
            "ScoringMode": ScoringMode,
            "explain_ranking": explain_ranking,
            "rank": rank,
            "score": score,
        }[name]
    raise AttributeError(name)
