from .waste_classifier import WasteClassifier
from .gemini_client import GeminiClient
from .gemini_classifier import GeminiWasteClassifier
from .groq_vlm_classifier import GroqVLMClassifier
from .filename_classifier import FilenameHeuristicClassifier
from .weather_client import OpenWeatherClient, WeatherReport

__all__ = [
    "WasteClassifier",
    "GeminiClient",
    "GeminiWasteClassifier",
    "GroqVLMClassifier",
    "FilenameHeuristicClassifier",
    "OpenWeatherClient",
    "WeatherReport",
]
