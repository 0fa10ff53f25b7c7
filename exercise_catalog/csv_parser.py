import re

from .const import HEADER_NAME, HEADER_GROUP, HEADER_SUBREGION_PREFIX, HEADER_HINT
from .models import Exercise, Target

LINE_BREAK = re.compile(r'\r\n|\r|\n')


class FormatError(ValueError):
    """Raised when the catalog header does not match Name,MuscleGroup,SubregionPairs."""


def _split_quoted(text, delimiter, maxsplit=None):
    """
    Splits text on delimiter, ignoring delimiters inside double-quoted spans.

    A doubled quote inside a quoted span becomes one literal quote. With
    maxsplit=1 the remainder after the first top-level delimiter is returned
    untouched (no quote processing, no further splitting).
    """
    parts = []
    buf = []
    in_quotes = False
    i = 0
    while i < len(text):
        c = text[i]
        if c == '"':
            if in_quotes and i + 1 < len(text) and text[i + 1] == '"':
                buf.append('"')
                i += 1  # skip the escaped quote
            else:
                in_quotes = not in_quotes
        elif c == delimiter and not in_quotes:
            parts.append(''.join(buf))
            buf = []
            if maxsplit is not None and len(parts) >= maxsplit:
                parts.append(text[i + 1:])
                return parts
        else:
            buf.append(c)
        i += 1
    parts.append(''.join(buf))
    return parts


def split_lines(raw_text):
    # Quoting never spans lines in this dialect
    return LINE_BREAK.split(raw_text)


def split_csv_row(row):
    """Comma-splits one line, respecting quoted fields. Every field is trimmed."""
    return [field.strip() for field in _split_quoted(row, ',')]


def split_by_semicolons(value):
    """Top-level semicolon split; blank items are dropped."""
    items = (item.strip() for item in _split_quoted(value, ';'))
    return [item for item in items if item]


def split_top_level_comma(value):
    """
    Splits once on the first top-level comma (Group,Subregion).

    Returns [value] when there is no unquoted comma at all.
    """
    parts = _split_quoted(value, ',', maxsplit=1)
    if len(parts) < 2:
        return [value]
    return parts


def _check_header(line):
    header = split_csv_row(line)
    if (len(header) < 3
            or header[0].lower() != HEADER_NAME
            or header[1].lower() != HEADER_GROUP
            or not header[2].lower().startswith(HEADER_SUBREGION_PREFIX)):
        raise FormatError(f"CSV header should be: {HEADER_HINT}")


def parse_row(cols):
    """Decodes one already-split row (at least 3 columns) into an Exercise."""
    name = cols[0].strip()
    # MuscleGroup is only a fallback; real targets come from SubregionPairs
    primary_group = cols[1].strip()
    subregion_pairs = cols[2].strip()

    targets = []
    if subregion_pairs:
        # e.g. 'Chest,Mid Chest (...); Shoulder,Front Delts (...)'
        for pair in split_by_semicolons(subregion_pairs):
            p = split_top_level_comma(pair)
            if len(p) >= 2:
                targets.append(Target(p[0].strip(), p[1].strip()))

    if not targets and primary_group:
        targets.append(Target(primary_group, ''))

    return Exercise(name=name, targets=targets)


def parse_catalog(raw_text):
    """
    Parses the exercise catalog CSV text into a list of Exercises.

    The first non-blank line must be the header. Data rows with fewer than
    3 columns are skipped. Raises FormatError on a bad header; an input with
    no non-blank lines yields an empty list.
    """
    lines = [line for line in split_lines(raw_text) if line.strip()]
    if not lines:
        return []

    _check_header(lines[0])

    result = []
    for line in lines[1:]:
        cols = split_csv_row(line.strip())
        if len(cols) < 3:
            continue
        result.append(parse_row(cols))
    return result
