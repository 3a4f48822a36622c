"""
Webhook relay - forwards raw command text to a configured endpoint.

Unrelated to transcoding: the chat surface hands over the argument text
of a `/webhook` command, the relay POSTs it as plain text and turns the
outcome into a reply the chat surface can send back verbatim.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

import requests

from chuk_mcp_glyphs.config import Settings
from chuk_mcp_glyphs.constants import (
    RELAY_CONTENT_TYPE,
    RELAY_UNPROCESSABLE_STATUS,
    RelayOutcome,
)

logger = logging.getLogger(__name__)

UNPROCESSABLE_MESSAGE = (
    "The server understood the request but was unable to process the command "
    "due to syntax errors or invalid data.\nError code 422"
)
HTTP_ERROR_MESSAGE = "An error occurred while sending data to the webhook."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while sending webhook data."

# Characters MarkdownV2 requires escaped inside code spans and blocks
_CODE_ESCAPE = re.compile(r"([`\\])")


@dataclass(frozen=True)
class RelayResult:
    """Outcome of one relay attempt."""

    outcome: RelayOutcome
    reply: str
    status_code: int | None = None
    payload: Any = None

    @property
    def success(self) -> bool:
        """True when the endpoint accepted the data."""
        return self.outcome == "sent"


def format_reply(message: Any) -> str:
    """
    Format a value for a MarkdownV2 chat message.

    Dicts and lists become a fenced JSON block, anything else an inline
    code span.
    """
    if isinstance(message, (dict, list)):
        body = _escape_code(json.dumps(message, indent=2, ensure_ascii=False))
        return f"```json\n{body}\n```"
    return f"`{_escape_code(str(message))}`"


def _escape_code(text: str) -> str:
    return _CODE_ESCAPE.sub(r"\\\1", text)


class WebhookRelay:
    """
    Posts text to the configured webhook endpoint.

    Never raises: every failure is logged and reported in the result.
    """

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        """
        Initialize the relay.

        Args:
            settings: Settings carrying the endpoint, timeout and user agent
            session: Optional requests session (defaults to module-level requests)
        """
        self.settings = settings
        self.session = session

    @property
    def headers(self) -> dict[str, str]:
        """Request headers."""
        return {
            "Content-Type": RELAY_CONTENT_TYPE,
            "User-Agent": self.settings.WEBHOOK_USER_AGENT,
        }

    def send(self, data: str) -> RelayResult:
        """
        POST data to the webhook and describe the outcome.

        Args:
            data: Raw command argument text

        Returns:
            RelayResult with a chat-ready reply
        """
        url = self.settings.WEBHOOK_URL
        logger.info(f"Sending data to webhook {url}")
        logger.debug(f"Payload: {data!r}")

        poster = self.session.post if self.session is not None else requests.post
        try:
            response = poster(
                url,
                data=data.encode("utf-8"),
                headers=self.headers,
                timeout=self.settings.WEBHOOK_TIMEOUT,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f"An error occurred while sending data to the webhook: {e}")
            if status == RELAY_UNPROCESSABLE_STATUS:
                return RelayResult("rejected", format_reply(UNPROCESSABLE_MESSAGE), status_code=status)
            return RelayResult("failed", format_reply(HTTP_ERROR_MESSAGE), status_code=status)
        except requests.RequestException as e:
            logger.error(f"An error occurred while sending data to the webhook: {e}")
            return RelayResult("failed", format_reply(HTTP_ERROR_MESSAGE))
        except Exception:
            logger.exception("An unexpected error occurred while sending webhook data")
            return RelayResult("error", format_reply(UNEXPECTED_ERROR_MESSAGE))

        payload = _response_payload(response)
        logger.info(f"Data sent to webhook successfully. Response: {payload!r}")
        return RelayResult(
            "sent",
            format_reply(payload),
            status_code=response.status_code,
            payload=payload,
        )


def _response_payload(response: requests.Response) -> Any:
    """JSON body when the endpoint returned JSON, text otherwise."""
    try:
        return response.json()
    except ValueError:
        return response.text
