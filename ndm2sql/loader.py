# ndm2sql/loader.py
from __future__ import annotations
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Union

from jsonschema import ValidationError
from jsonschema.validators import Draft7Validator
from pydantic import ValidationError as ModelValidationError

from ndm2sql.errors import ReadError, DecodeError, WriteError
from ndm2sql.meta_models import ModelFile
from ndm2sql.settings import get_settings

logger = logging.getLogger(__name__)

SPEC_PATH = Path(__file__).parent / "schema_definitions" / "ndm2_schema.json"

PathLike = Union[str, Path]

@lru_cache
def _validator() -> Draft7Validator:
    spec = json.loads(SPEC_PATH.read_text(encoding="utf-8"))
    Draft7Validator.check_schema(spec)
    return Draft7Validator(spec)

def parse_model(data: object) -> ModelFile:
    """
    Validate an already-decoded document and build the model tree.
    Only the shape is checked; dangling key/table references pass through.
    """
    try:
        _validator().validate(data)
    except ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise DecodeError(f"Model validation failed at {where}: {e.message}") from e

    try:
        return ModelFile.model_validate(data)
    except ModelValidationError as e:
        raise DecodeError(f"Model validation failed: {e}") from e

def load_model(path: PathLike) -> ModelFile:
    encoding = get_settings().ENCODING
    try:
        raw = Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeError, LookupError) as e:
        raise ReadError(f"Failed to read {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON in {path}: {e}") from e

    model = parse_model(data)
    logger.info("Loaded model from %s with %d catalogs", path, len(model.server.catalogs))
    return model

def save_sql(sql: str, path: PathLike) -> None:
    # output is always UTF-8, encoded before the file is opened
    try:
        data = sql.encode("utf-8")
        Path(path).write_bytes(data)
    except (OSError, UnicodeError) as e:
        raise WriteError(f"Failed to write {path}: {e}") from e
    logger.info("Wrote %d characters of SQL to %s", len(sql), path)
