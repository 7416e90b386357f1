# -*- coding: utf-8 -*-
"""Centralized Translation Manager for the fixed Arabic label set."""

from utils.logger import get_logger

logger = get_logger(__name__)


class TranslationManager:
    """Singleton Translation Manager."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._current_language = "ar"
            cls._instance._translations = {}
            cls._instance._load_translations()
        return cls._instance

    def _load_translations(self):
        from services.translations.ar import AR_TRANSLATIONS
        self._translations = {"ar": AR_TRANSLATIONS}

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(
            self._current_language, {}
        ).get(key)
        if translation is None:
            logger.debug(f"Missing translation key: {key}")
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError) as e:
                logger.warning(f"Bad placeholders for translation key {key}: {e}")
        return translation

    def has_key(self, key: str) -> bool:
        return key in self._translations.get(self._current_language, {})


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def get_language() -> str:
    return _translator.get_language()
