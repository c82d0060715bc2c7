# consult/services/priority.py
import re
from typing import Dict, Iterable, List, Union

from consult.config import MAX_QUICK_WINS, MAX_TESTS
from consult.services.recommendations import QUICK_WIN, Recommendation

QUICK_WIN_PATTERN = re.compile(r"Add|Fix|Reduce|Standardize|Improve|Clarify", re.IGNORECASE)

def category_of(rec: Union[Recommendation, str]) -> str:
    """Tagged recommendations keep their tag; bare strings are sorted by their action verb."""
    if isinstance(rec, Recommendation):
        return rec.category
    return QUICK_WIN if QUICK_WIN_PATTERN.search(rec) else "test"

def prioritize(recs: Iterable[Union[Recommendation, str]],
               max_quick_wins: int = MAX_QUICK_WINS,
               max_tests: int = MAX_TESTS) -> Dict[str, List[str]]:
    """
    Split recommendations into quick wins (~7 days) and tests (~30 days).
    Generator order is kept; anything past the caps is dropped.
    """
    quick: List[str] = []
    tests: List[str] = []
    for rec in recs:
        (quick if category_of(rec) == QUICK_WIN else tests).append(str(rec))
    return {"quick_wins": quick[:max_quick_wins], "tests": tests[:max_tests]}
