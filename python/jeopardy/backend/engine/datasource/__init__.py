from jeopardy.backend.engine.datasource.client import (
    DEFAULT_BASE_URL,
    CategoryDetail,
    CategorySummary,
    JServiceClient,
    RawClue,
    TriviaSource,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "CategoryDetail",
    "CategorySummary",
    "JServiceClient",
    "RawClue",
    "TriviaSource",
]
