# topmark:header:start
#
#   project      : elm-enums
#   file         : channel.py
#   file_relpath : src/elm_enums/translator/channel.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""One-shot request/result channel between the driver and a translator.

A channel accepts exactly one subscriber and carries exactly one request. The
result is handed to the subscriber before `TranslationChannel.send` returns.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from elm_enums.config.logging import get_logger
from elm_enums.translator.contracts import TranslationFailure

if TYPE_CHECKING:
    from elm_enums.config.logging import ElmEnumsLogger
    from elm_enums.translator.contracts import TranslationResult, Translator

logger: ElmEnumsLogger = get_logger(__name__)

ResultCallback = Callable[["TranslationResult"], None]


class ChannelError(RuntimeError):
    """Raised when the one-subscriber / one-request contract is violated."""


class TranslationChannel:
    """Single-use port wrapping a `Translator`.

    Args:
        translator (Translator): The translator that serves the request.
    """

    def __init__(self, translator: Translator) -> None:
        self._translator = translator
        self._subscriber: ResultCallback | None = None
        self._sent: bool = False

    @property
    def sent(self) -> bool:
        """Whether the request has already been sent."""
        return self._sent

    def subscribe(self, callback: ResultCallback) -> None:
        """Register the consumer of the translation result.

        Args:
            callback (ResultCallback): Called once with the `TranslationResult`.

        Raises:
            ChannelError: If a subscriber is already registered.
        """
        if self._subscriber is not None:
            raise ChannelError("translation channel already has a subscriber")
        self._subscriber = callback

    def send(self, source: str) -> None:
        """Submit the definitions text and deliver the result to the subscriber.

        A translator that raises is reported to the subscriber as a
        `TranslationFailure` carrying the exception text.

        Args:
            source (str): The definitions text.

        Raises:
            ChannelError: If nobody subscribed yet, or a request was already sent.
        """
        if self._subscriber is None:
            raise ChannelError("no subscriber registered on translation channel")
        if self._sent:
            raise ChannelError("translation channel is single-use; request already sent")
        self._sent = True

        logger.debug("Sending %d characters to %s", len(source), type(self._translator).__name__)
        result: TranslationResult
        try:
            result = self._translator.translate(source)
        except Exception as exc:
            logger.exception("Translator %s raised", type(self._translator).__name__)
            result = TranslationFailure(error=str(exc) or type(exc).__name__)
        logger.trace("Translation result: %r", result)
        self._subscriber(result)
