"""Capa CLI (Typer + Rich): único sitio que imprime y decide el exit code."""
