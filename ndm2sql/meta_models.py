# ndm2sql/meta_models.py
from __future__ import annotations
from enum import Enum
from typing import Tuple, Optional, Any
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# Navicat writes INT_MIN for "no length / no decimals"
UNSET_NUMBER = -2147483648

class DefaultType(str, Enum):
    NONE = "None"
    EXPRESSION = "Expression"

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _null_to_default(cls, data: Any) -> Any:
        """
        Modeler exports use JSON null for "not set". Optional keys fall back to
        their defaults; required names become "".
        """
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if value is None:
                info = cls.model_fields.get(key)
                if info is None or not info.is_required():
                    continue
                value = ""
            cleaned[key] = value
        return cleaned

class Field(_Frozen):
    name: str
    type: str
    length: Optional[int] = None
    decimals: Optional[int] = None
    isNullable: bool = False
    # a missing kind means no DEFAULT clause; an explicit "" still renders one
    defaultType: str = DefaultType.NONE.value
    defaultValue: str = ""

    @field_validator("length", "decimals", mode="before")
    @classmethod
    def _unset_to_none(cls, v: Any) -> Any:
        if v == UNSET_NUMBER:
            return None
        return v

class PrimaryKey(_Frozen):
    name: str = ""
    fields: Tuple[str, ...] = ()

class ForeignKey(_Frozen):
    name: str
    fields: Tuple[str, ...] = ()
    referenceTable: str
    referenceFields: Tuple[str, ...] = ()

class Table(_Frozen):
    name: str
    fields: Tuple[Field, ...] = ()
    primaryKey: PrimaryKey = PrimaryKey()
    foreignKeys: Tuple[ForeignKey, ...] = ()

class Schema(_Frozen):
    name: str
    tables: Tuple[Table, ...] = ()

class Catalog(_Frozen):
    name: str
    schemas: Tuple[Schema, ...] = ()

class Server(_Frozen):
    catalogs: Tuple[Catalog, ...] = ()

class ModelFile(_Frozen):
    server: Server
