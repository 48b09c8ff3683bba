"""
Opponent database.

Handles loading and validation of the per-difficulty opponent tables
(stat block, name and skill set). The combat engine never reads these
files itself; it only receives the Characters built from them.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import jsonschema
from pydantic import ValidationError

from duel.core.component import Component
from duel.components.character import Character, StatBlock
from duel.components.skills import Skill
from duel.battle.ai import Difficulty

DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data"

SCHEMA_NAME = "opponent.schema.json"


class OpponentNotFoundError(LookupError):
    """No opponent is defined for a difficulty."""


class OpponentProfile(Component):
    """A validated opponent table entry."""
    difficulty: Difficulty
    name: str
    stats: StatBlock
    skills: tuple[Skill, ...]

    def create_character(self) -> Character:
        """Build the opponent at full HP and MP."""
        return Character.create(self.name, self.stats, self.skills)


class OpponentDatabase:
    """
    Central storage for opponent tables.

    Layout under the data path:
        schemas/opponent.schema.json
        opponents/*.json   (one object or a list of objects per file)
    """

    def __init__(self, data_path: Optional[Path | str] = None):
        self._data_path = Path(data_path) if data_path else DEFAULT_DATA_PATH
        self._schema: Optional[dict[str, Any]] = None

        # Data store
        self.opponents: dict[Difficulty, OpponentProfile] = {}

        self.logger = logging.getLogger(__name__)

    def load_all(self) -> None:
        """Load all opponent tables from disk."""
        self._load_schema()
        self.opponents = self._load_opponents()

        self.logger.info(
            f"Loaded {len(self.opponents)} opponents "
            f"({', '.join(d.value for d in self.opponents)})."
        )

    def _load_schema(self) -> None:
        """Load the opponent JSON schema."""
        schema_file = self._data_path / "schemas" / SCHEMA_NAME
        if not schema_file.exists():
            self.logger.warning(f"Schema not found: {schema_file}")
            self._schema = None
            return

        try:
            with open(schema_file, 'r', encoding='utf-8') as f:
                self._schema = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.logger.error(f"Failed to load schema {schema_file}: {e}")
            self._schema = None

    def _load_opponents(self) -> dict[Difficulty, OpponentProfile]:
        """Load every JSON file in the opponents folder."""
        category_dir = self._data_path / "opponents"
        data_store: dict[Difficulty, OpponentProfile] = {}

        if not category_dir.exists():
            self.logger.warning(f"Data directory not found: {category_dir}")
            return data_store

        if self._schema is None:
            self.logger.warning(f"No schema found for opponents ({SCHEMA_NAME})")
            return data_store

        for file_path in sorted(category_dir.glob("*.json")):
            try:
                with open(file_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.error(f"Failed to load {file_path}: {e}")
                continue

            records = data if isinstance(data, list) else [data]
            for record in records:
                profile = self._parse_record(record, file_path)
                if profile is None:
                    continue
                if profile.difficulty in data_store:
                    self.logger.warning(
                        f"Duplicate opponent for {profile.difficulty.value} in {file_path}; "
                        f"replacing {data_store[profile.difficulty].name}"
                    )
                data_store[profile.difficulty] = profile

        return data_store

    def _parse_record(self, record: Any, file_path: Path) -> Optional[OpponentProfile]:
        """Validate one raw record against the schema and the models."""
        try:
            jsonschema.validate(instance=record, schema=self._schema)
        except jsonschema.ValidationError as e:
            self.logger.error(f"Validation error in {file_path}: {e.message}")
            return None

        try:
            return OpponentProfile.model_validate(record)
        except ValidationError as e:
            self.logger.error(f"Invalid opponent in {file_path}: {e}")
            return None

    def get_opponent(self, difficulty: Difficulty) -> Optional[OpponentProfile]:
        return self.opponents.get(difficulty)

    def create_opponent(self, difficulty: Difficulty) -> Character:
        """
        Build the opponent Character for a difficulty.

        Raises:
            OpponentNotFoundError: If no opponent is loaded for it
        """
        profile = self.get_opponent(difficulty)
        if profile is None:
            raise OpponentNotFoundError(f"No opponent defined for difficulty '{difficulty.value}'")
        return profile.create_character()
