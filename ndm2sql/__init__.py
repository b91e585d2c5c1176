from ndm2sql.ddl_builder import generate_sql, render_column
from ndm2sql.loader import load_model, parse_model, save_sql

__all__ = ["generate_sql", "render_column", "load_model", "parse_model", "save_sql"]
