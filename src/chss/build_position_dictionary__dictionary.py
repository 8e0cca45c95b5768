"""Load the static opening table into a PositionDictionary."""

from __future__ import annotations

import json
from pathlib import Path

from chss.errors import ChssError
from chss.position_dictionary import PositionDictionary
from chss.ports.rules_engine import RulesEngine
from chss.utils.logger import funclogger, get_logger

logger = get_logger(__name__)

DEFAULT_DICTIONARY_PATH = Path(__file__).resolve().parent / "data" / "opening_keys.json"


@funclogger
def build_position_dictionary(
    rules: RulesEngine,
    path: Path | str | None = None,
) -> PositionDictionary:
    """Build the dictionary from a JSON object of ``{key: move-history}`` pairs.

    Args:
        rules: Rules engine used to replay each line once.
        path: Data file; defaults to the packaged opening table.

    Returns:
        The read-only PositionDictionary.
    """
    source = Path(path) if path is not None else DEFAULT_DICTIONARY_PATH
    data = json.loads(source.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ChssError(f"Dictionary file {source} must contain a JSON object")
    dictionary = PositionDictionary.from_lines(data, rules)
    logger.info("Loaded %s dictionary keys from %s", len(dictionary), source)
    return dictionary
