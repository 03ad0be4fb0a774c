from __future__ import annotations

import logging

import httpx

from spelling_quiz.bank.parser import parse_delimited_text
from spelling_quiz.bank.store import QuestionBank

logger = logging.getLogger(__name__)


class EmptyBankError(ValueError):
    pass


class BankLoadError(RuntimeError):
    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


async def load_bank_from_url(
    bank: QuestionBank,
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = 15,
) -> int:
    """Fetch an ``answer<TAB>clue`` list and make it the active bank.

    Returns the number of records loaded. On any failure the bank keeps its
    previous contents.
    """
    text = await _fetch_text(url, client=client, timeout=timeout)
    parsed = parse_delimited_text(text)
    if not parsed:
        logger.warning("Bank source %s had no valid answer<TAB>clue lines", url)
        raise EmptyBankError("Parsed 0 valid lines (needs answer<TAB>clue).")

    loaded = bank.replace(parsed)
    logger.info("Loaded %d questions from %s", loaded, url)
    return loaded


async def _fetch_text(url: str, *, client: httpx.AsyncClient | None, timeout: float) -> str:
    headers = {"Cache-Control": "no-store"}
    try:
        if client is not None:
            resp = await client.get(url, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                resp = await own_client.get(url, headers=headers)
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.warning("Bank source %s answered HTTP %s", url, exc.response.status_code)
        raise BankLoadError(f"HTTP {exc.response.status_code}", cause=exc) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Bank source %s unreachable: %s", url, exc)
        raise BankLoadError(f"fetch failed: {exc}", cause=exc) from exc
    return resp.text
