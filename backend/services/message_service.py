"""Localized user-facing messages for play errors."""

import logging
from typing import Optional

from config import settings
from utils.errors import PlayError

logger = logging.getLogger(__name__)


MESSAGES: dict[str, dict[PlayError, str]] = {
    "en": {
        PlayError.BET_NOT_VALID: "The selected bet does not exist.",
        PlayError.BET_NOT_VALID_MIN: "The amount is below the minimum allowed for this bet.",
        PlayError.BET_NOT_VALID_MAX: "The amount is above the maximum allowed for this bet.",
        PlayError.CHOICE_NOT_VALID: "The selected option is not valid for this bet.",
        PlayError.BET_CLOSED: "This bet is closed. Plays are accepted until 10 minutes before the match.",
    },
    "es": {
        PlayError.BET_NOT_VALID: "La apuesta seleccionada no existe.",
        PlayError.BET_NOT_VALID_MIN: "El monto es menor al mínimo permitido para esta apuesta.",
        PlayError.BET_NOT_VALID_MAX: "El monto es mayor al máximo permitido para esta apuesta.",
        PlayError.CHOICE_NOT_VALID: "La opción seleccionada no es válida para esta apuesta.",
        PlayError.BET_CLOSED: "La apuesta está cerrada. Se aceptan jugadas hasta 10 minutos antes del partido.",
    },
}


class MessageService:
    """
    Resolves error kinds to text in the caller's language.

    Locales may be given as a bare tag ("es"), a regional tag ("es-AR") or a
    full Accept-Language header ("es-AR,es;q=0.9,en;q=0.8"). The first
    supported language wins; anything else falls back to the default locale.
    """

    def __init__(self, default_locale: Optional[str] = None):
        self.default_locale = default_locale or settings.default_locale
        if self.default_locale not in MESSAGES:
            logger.warning(
                f"Default locale {self.default_locale!r} has no messages, using 'en'"
            )
            self.default_locale = "en"

    def resolve_locale(self, locale: Optional[str]) -> str:
        """Pick the first supported language from a locale or header value."""
        if not locale:
            return self.default_locale

        for part in locale.split(","):
            tag = part.split(";", 1)[0].strip().lower()
            language = tag.replace("_", "-").split("-", 1)[0]
            if language in MESSAGES:
                return language

        return self.default_locale

    def get_message(self, kind: PlayError, locale: Optional[str] = None) -> str:
        """Get the user-facing text for an error kind."""
        return MESSAGES[self.resolve_locale(locale)][kind]


# Singleton instance
message_service = MessageService()
