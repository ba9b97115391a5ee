from .classify_waste import ClassifyWasteUseCase
from .list_classifications import ListClassificationsUseCase
from .detect_labels import DetectLabelsUseCase

__all__ = [
    "ClassifyWasteUseCase",
    "ListClassificationsUseCase",
    "DetectLabelsUseCase",
]
