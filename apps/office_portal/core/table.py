"""
Table operations shared by every list page: search, facet filter, CSV export
"""
import csv
import io


def _cell_text(value):
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def filter_rows(rows, term, fields):
    """Case-insensitive substring search across ``fields``

    An empty term returns every row.
    """
    needle = (term or '').strip().lower()
    if not needle:
        return list(rows)

    return [
        row for row in rows
        if any(needle in _cell_text(row.get(field)).lower() for field in fields)
    ]


def facet_filter(rows, field, value):
    """Exact (case-insensitive) match on one field; 'all' or empty disables it"""
    if not field or value is None:
        return list(rows)
    wanted = str(value).strip().lower()
    if wanted in ('', 'all'):
        return list(rows)
    return [row for row in rows if _cell_text(row.get(field)).lower() == wanted]


def facet_options(rows, field):
    """Distinct non-empty values of ``field`` in first-seen order"""
    if not field:
        return []
    seen = []
    for row in rows:
        text = _cell_text(row.get(field))
        if text and text not in seen:
            seen.append(text)
    return seen


def to_csv(rows, columns):
    """Serialize rows to CSV text

    ``columns`` is a sequence of (key, label) pairs. Fields containing a
    comma, quote, CR or LF are quoted and inner quotes doubled. Lines end
    with ``\\n``.
    """
    lines = [_csv_line([label for _, label in columns])]
    for row in rows:
        lines.append(_csv_line([_cell_text(row.get(key)) for key, _ in columns]))
    return ''.join(lines)


def _csv_line(cells):
    # QUOTE_MINIMAL only quotes characters found in the line terminator,
    # so write with CRLF to catch both CR and LF, then emit LF.
    buffer = io.StringIO()
    csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator='\r\n').writerow(cells)
    return buffer.getvalue()[:-2] + '\n'
