"""Exception hierarchy for the Gamelle AI helpers."""

from __future__ import annotations


class GamelleError(Exception):
    """Base class for every error raised by the Gamelle core."""

    user_message: str = "Une erreur est survenue. Veuillez réessayer."

    def __init__(self, message: str = "", user_message: str | None = None) -> None:
        super().__init__(message or self.user_message)
        if user_message is not None:
            self.user_message = user_message


class ConfigurationError(GamelleError):
    """A setting is missing or invalid."""

    user_message = "Le service IA est mal configuré."


class MissingCredentialError(ConfigurationError):
    """No Gemini API key is set in the environment."""

    user_message = "La clé API Gemini n'est pas configurée ou accessible."


class GenerationError(GamelleError):
    """A call to the AI service did not produce a usable answer."""

    user_message = "Le service IA est indisponible pour le moment. Veuillez réessayer."


class RemoteCallError(GenerationError):
    """The SDK or the network failed while talking to Gemini."""


class EmptyResponseError(GenerationError):
    """Gemini answered but the reply carried no text."""

    user_message = "L'API a retourné une réponse vide."


class ParseError(GenerationError):
    """The reply text did not have the expected JSON shape."""
