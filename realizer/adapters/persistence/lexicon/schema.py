# realizer/adapters/persistence/lexicon/schema.py
"""
lexicon/schema.py
=================

Schema of the lexicon JSON shards, expressed as pydantic models.

A shard looks like:

    {
      "meta": {"language": "es", "schema_version": 1},
      "entries": {
        "E0101": {
          "lemma": "gato",
          "pos": "noun",
          "features": {"gender": "masculine"},
          "forms": {"plural": "gatos"}
        }
      }
    }

Keys of `entries` are the entry ids. `features` keys must be known feature
names and their values must fit the feature's declared type; enum values
may be given by value or by name ("feminine", "FEMININE"). Any mismatch is
a schema error, and schema errors are fatal.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from realizer.core.domain.exceptions import FeatureValueError
from realizer.core.domain.features import Category, FeatureStore

from .errors import LexiconSchemaError

SCHEMA_VERSION: int = 1


class LexiconMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    language: Optional[str] = None
    schema_version: int = SCHEMA_VERSION
    description: Optional[str] = None


class EntrySchema(BaseModel):
    """One lexicon entry."""

    model_config = ConfigDict(extra="forbid")

    lemma: str = Field(..., min_length=1)
    pos: Category
    spelling: Optional[str] = None
    features: Dict[str, Any] = Field(default_factory=dict)
    forms: Dict[str, str] = Field(default_factory=dict)

    @field_validator("pos", mode="before")
    @classmethod
    def _lower_pos(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("features")
    @classmethod
    def _check_features(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        try:
            FeatureStore(value)
        except FeatureValueError as exc:
            raise ValueError(exc.message) from exc
        return value


class LexiconFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    meta: LexiconMeta = Field(default_factory=LexiconMeta)
    entries: Dict[str, EntrySchema] = Field(default_factory=dict)


def parse_lexicon_file(path: str, data: Any) -> LexiconFile:
    """
    Validate the decoded JSON of one shard.

    Raises:
        LexiconSchemaError: if the data does not match the schema.
    """
    if not isinstance(data, dict):
        raise LexiconSchemaError(path, "root must be a JSON object")
    try:
        return LexiconFile.model_validate(data)
    except ValidationError as exc:
        raise LexiconSchemaError(path, str(exc)) from exc


__all__ = [
    "SCHEMA_VERSION",
    "LexiconMeta",
    "EntrySchema",
    "LexiconFile",
    "parse_lexicon_file",
]
