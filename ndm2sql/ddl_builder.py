# ndm2sql/ddl_builder.py
from __future__ import annotations
import logging
from typing import Callable, List, Sequence, Tuple

from ndm2sql.meta_models import ModelFile, Schema, Table, Field, DefaultType

logger = logging.getLogger(__name__)

STATEMENT_END = ";\n\n"

def _join(names: Sequence[str]) -> str:
    return ", ".join(names)

def render_column(field: Field) -> str:
    col_def = f"{field.name} {field.type}"
    if field.length is not None:
        col_def += f"({field.length}"
        if field.decimals is not None:
            col_def += f",{field.decimals})"
        else:
            col_def += ")"
    if not field.isNullable:
        col_def += " NOT NULL"
    if field.defaultType != DefaultType.NONE.value:
        value = field.defaultValue
        # Expression kinds are the quoted ones; every other kind is emitted raw
        if field.defaultType == DefaultType.EXPRESSION.value:
            value = f"'{value}'"
        col_def += f" DEFAULT {value}"
    return col_def

def create_table_sql(table: Table) -> str:
    columns = ",\n  ".join(render_column(f) for f in table.fields)
    return f"CREATE TABLE {table.name} (\n  {columns}\n){STATEMENT_END}"

def primary_key_sql(table: Table) -> str:
    return (
        f"ALTER TABLE {table.name} ADD CONSTRAINT pk_{table.name} "
        f"PRIMARY KEY ({_join(table.primaryKey.fields)}){STATEMENT_END}"
    )

def foreign_keys_sql(table: Table) -> str:
    return "".join(
        f"ALTER TABLE {table.name} ADD CONSTRAINT {fk.name} "
        f"FOREIGN KEY ({_join(fk.fields)}) "
        f"REFERENCES {fk.referenceTable} ({_join(fk.referenceFields)}){STATEMENT_END}"
        for fk in table.foreignKeys
    )

def primary_key_index_sql(table: Table) -> str:
    return f"CREATE INDEX idx_{table.name}_id ON {table.name} ({_join(table.primaryKey.fields)}){STATEMENT_END}"

def foreign_key_indexes_sql(table: Table) -> str:
    return "".join(
        f"CREATE INDEX idx_fk_{table.name}_{fk.referenceTable} ON {table.name} ({_join(fk.fields)}){STATEMENT_END}"
        for fk in table.foreignKeys
    )

# Each pass runs over every table of a schema before the next pass starts,
# so all CREATE TABLEs precede any constraint that references them.
PASSES: Tuple[Callable[[Table], str], ...] = (
    create_table_sql,
    primary_key_sql,
    foreign_keys_sql,
    primary_key_index_sql,
    foreign_key_indexes_sql,
)

def generate_schema_sql(schema: Schema) -> str:
    parts: List[str] = []
    for render in PASSES:
        for table in schema.tables:
            parts.append(render(table))
    logger.debug("Rendered schema %s: %d tables", schema.name, len(schema.tables))
    return "".join(parts)

def generate_sql(model: ModelFile) -> str:
    """
    Render the whole model as one DDL script.
    Catalogs and schemas are concatenated in input order; nothing is validated.
    """
    parts: List[str] = []
    for catalog in model.server.catalogs:
        for schema in catalog.schemas:
            parts.append(generate_schema_sql(schema))
    return "".join(parts)
