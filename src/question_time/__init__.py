"""Question Time package.

Focus: flashcard study sessions over named question banks, with free-form
yes/no responses judged by a k-NN classifier.
"""

__all__ = [
    "models",
    "normalize",
    "distance",
    "knn",
    "sentiment",
    "engine",
    "ingest",
    "menu",
    "study",
    "report",
    "cli",
]
