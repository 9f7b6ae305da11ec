"""
Attribute Tokenizer
===================

Exporter, attestation and provenance options all share the same grammar:
comma-separated `key=value` fields, one option per line, where fields may be
double-quoted and padded with whitespace because they come straight from
shell-quoted workflow inputs, e.g.

    " type= local" , dest=./release-out
    "type=tar","dest=/tmp/image.tar"

This module is the one place that grammar is parsed.
"""

import csv
import io
from typing import List, Optional, Tuple


def clean_field(field: str) -> str:
    """Strip surrounding whitespace and stray double quotes from a field."""
    return field.strip().strip('"').strip()


def parse_records(text: str) -> List[List[str]]:
    """
    Split attribute text into records of cleaned fields.

    Each line is a record; commas inside double quotes do not split.
    Blank lines and empty fields are dropped.

    Examples:
        >>> parse_records('" type= local" , dest=./out')
        [['type= local', 'dest=./out']]
    """
    records: List[List[str]] = []
    for row in csv.reader(io.StringIO(text), skipinitialspace=True):
        fields = [cleaned for cleaned in (clean_field(f) for f in row) if cleaned]
        if fields:
            records.append(fields)
    return records


def parse_fields(text: str) -> List[str]:
    """All cleaned fields of every record, in order."""
    return [field for record in parse_records(text) for field in record]


def split_attr(field: str) -> Tuple[str, Optional[str]]:
    """
    Split a field on its first '=' and trim both sides.

    Returns:
        (key, value); value is None for a bare token without '='

    Examples:
        >>> split_attr("type= local")
        ('type', 'local')
        >>> split_attr("dest=./a=b")
        ('dest', './a=b')
        >>> split_attr("true")
        ('true', None)
    """
    key, sep, value = field.partition("=")
    if not sep:
        return key.strip(), None
    return key.strip(), value.strip()


def has_attr(text: str, key: str, value: str) -> bool:
    """True iff some field of `text` is `key=value`."""
    return any(split_attr(field) == (key, value) for field in parse_fields(text))


def join_fields(fields: List[str]) -> str:
    """
    Join fields back into one record, quoting those that hold ',' or '"'.

    Examples:
        >>> join_fields(["type=sbom", "generator=a,b"])
        'type=sbom,"generator=a,b"'
    """
    buf = io.StringIO()
    csv.writer(buf, lineterminator="").writerow(fields)
    return buf.getvalue()
