"""
Puzzle Service

Fetches archived daily puzzles from the remote puzzle service and picks a
random archive date for each new round.
"""

import abc
import random
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

import requests

from ..config.app_config import Config
from ..models.errors import PuzzleFetchError
from ..models.game import Puzzle


class PuzzleSource(abc.ABC):
    """Anything that can provide the puzzle for a calendar date."""

    @abc.abstractmethod
    def fetch(self, puzzle_date: date) -> Puzzle:
        ...


class NytPuzzleSource(PuzzleSource):
    """
    Puzzle archive served as one JSON document per day.

    The payload carries ``id``, ``solution``, ``print_date``,
    ``days_since_launch`` and ``editor``.
    """

    def __init__(self,
                 url_template: str = Config.PUZZLE_URL,
                 timeout: float = Config.REQUEST_TIMEOUT_SECONDS,
                 session: Optional[requests.Session] = None):
        self.url_template = url_template
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, puzzle_date: date) -> Puzzle:
        url = self.url_template.format(date=puzzle_date.strftime('%Y-%m-%d'))
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise PuzzleFetchError(f"Failed to fetch puzzle for {puzzle_date}: {e}") from e
        except ValueError as e:
            raise PuzzleFetchError(f"Invalid JSON in puzzle response for {puzzle_date}: {e}") from e

        return parse_puzzle(payload)


def parse_puzzle(payload: Dict[str, Any]) -> Puzzle:
    """
    Build a Puzzle from a puzzle service payload.

    Raises:
        PuzzleFetchError: If required fields are missing or malformed
    """
    if not isinstance(payload, dict):
        raise PuzzleFetchError("Puzzle response must be a JSON object")

    try:
        solution = str(payload['solution']).strip().lower()
        identifier = int(payload['id'])
    except (KeyError, TypeError, ValueError) as e:
        raise PuzzleFetchError(f"Malformed puzzle response: {e}") from e

    if not solution.isalpha():
        raise PuzzleFetchError(f"Puzzle solution '{solution}' contains non-alphabetic characters")

    return Puzzle(
        solution=solution,
        identifier=identifier,
        label=str(payload.get('editor') or 'unknown'),
        print_date=str(payload.get('print_date', '')),
        days_since_launch=payload.get('days_since_launch'),
    )


def random_puzzle_date(rng: random.Random,
                       oldest_timestamp: int = Config.OLDEST_PUZZLE_TIMESTAMP,
                       now: Optional[datetime] = None) -> date:
    """Uniformly random UTC date between the oldest archived puzzle and now."""
    now = now or datetime.now(timezone.utc)
    newest_timestamp = int(now.timestamp())
    if newest_timestamp <= oldest_timestamp:
        raise ValueError("Current time precedes the oldest archived puzzle")
    timestamp = rng.randrange(oldest_timestamp, newest_timestamp)
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).date()


def random_puzzle(source: PuzzleSource, rng: random.Random) -> Puzzle:
    return source.fetch(random_puzzle_date(rng))
