import os
import tempfile

# The game logger is created at import time; keep its files out of the repo.
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='infinite_wordle_logs_'))

import pytest

from infinite_wordle.models.game import Puzzle
from infinite_wordle.services.puzzle_service import PuzzleSource


class StubPuzzleSource(PuzzleSource):
    def __init__(self, *solutions):
        self.solutions = list(solutions)
        self.requested_dates = []

    def fetch(self, puzzle_date):
        self.requested_dates.append(puzzle_date)
        index = len(self.requested_dates) - 1
        solution = self.solutions[index % len(self.solutions)]
        return Puzzle(solution=solution, identifier=500 + index, label="Tracy Bennett",
                      print_date=puzzle_date.isoformat(), days_since_launch=500 + index)


@pytest.fixture
def stub_source():
    return StubPuzzleSource("crane")


@pytest.fixture
def accept_all():
    return lambda word: True
