"""
Unit tests for the DI container and classifier selection.
"""
from unittest.mock import MagicMock

import pytest

from environ_backend.di.base_container import BaseContainer
from environ_backend.di.providers.service_provider import build_classifier
from environ_backend.infrastructure.external import FilenameHeuristicClassifier, GeminiWasteClassifier


class _Service:
    pass


class TestBaseContainer:
    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = _Service()
        container.register_singleton(_Service, instance)

        assert container.get(_Service) is instance
        assert container.get(_Service) is instance

    def test_factory_builds_each_time(self):
        container = BaseContainer()
        container.register_factory(_Service, _Service)

        assert container.get(_Service) is not container.get(_Service)

    def test_string_keys(self):
        container = BaseContainer()
        container.register_singleton("user_collection", "users")
        assert container.get("user_collection") == "users"

    def test_reregistering_replaces(self):
        container = BaseContainer()
        container.register_factory(_Service, _Service)
        replacement = _Service()
        container.register_singleton(_Service, replacement)

        assert container.get(_Service) is replacement

    def test_missing_dependency(self):
        container = BaseContainer()
        assert container.is_registered(_Service) is False
        with pytest.raises(ValueError, match="_Service"):
            container.get(_Service)


class TestBuildClassifier:
    def test_gemini(self):
        assert isinstance(build_classifier("gemini", MagicMock()), GeminiWasteClassifier)

    def test_filename(self):
        assert isinstance(build_classifier("filename", MagicMock()), FilenameHeuristicClassifier)

    def test_unknown(self):
        with pytest.raises(ValueError, match="CLASSIFIER_PROVIDER"):
            build_classifier("tesseract", MagicMock())
