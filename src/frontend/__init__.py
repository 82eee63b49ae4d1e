"""Shared start-up for the CLI and the Flask API."""
from __future__ import annotations
from typing import Iterable, Optional
from textindex.engine import Engine

def initialize(records_csv: Optional[str] = None,
               roots: Optional[Iterable[str]] = None,
               verbose: bool = False) -> Engine:
    """
    Build an Engine from a vocabulary CSV and/or corpus folders.
    Without a CSV the record store starts empty (memory://).
    """
    eng = Engine()
    dsn = f"csv:///{records_csv}" if records_csv else "memory://"
    eng.build(roots=list(roots or []), db_dsn=dsn, verbose=verbose)
    return eng
