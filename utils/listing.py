"""
Listing Module - Pure projections over fetched content rows

Shared by the public pages (server side) and the admin list-manager
(client side). Nothing here touches the database or mutates its input.
"""

import re
from typing import Dict, Iterable, List, Optional, Sequence

ALL = 'all'
STATUS_OPTIONS = ('all', 'active', 'inactive')
ALL_BUCKET_NAME = 'All Projects'


def split_list(text: Optional[str], delimiter: str = ',') -> List[str]:
    """
    Parse a delimited string into an ordered list of strings.

    Segments are trimmed and empty segments dropped, so
    ``"Go, , Python ,"`` becomes ``["Go", "Python"]``.
    """
    if not text:
        return []
    return [part.strip() for part in text.split(delimiter) if part.strip()]


def join_list(items: Optional[Iterable[str]], delimiter: str = ', ') -> str:
    """Render an ordered list of strings for single-line editing"""
    if not items:
        return ''
    return delimiter.join(str(item) for item in items)


def matches_term(row: Dict, term: str, fields: Sequence[str]) -> bool:
    """Case-insensitive substring match of ``term`` on any of ``fields``"""
    if not term:
        return True
    needle = term.lower()
    for field in fields:
        value = row.get(field)
        if value is not None and needle in str(value).lower():
            return True
    return False


def matches_status(row: Dict, status: str = ALL) -> bool:
    if status == 'active':
        return bool(row.get('isActive'))
    if status == 'inactive':
        return not row.get('isActive')
    return True


def matches_category(row: Dict, category: str = ALL) -> bool:
    if not category or category == ALL:
        return True
    return row.get('category') == category


def filter_rows(rows: Sequence[Dict], term: str = '', fields: Sequence[str] = (),
                status: str = ALL, category: str = ALL) -> List[Dict]:
    """
    Search and filter an in-memory list.

    The text predicate and the status/category predicates are ANDed.
    The source list is never modified; a new list is always returned.
    """
    return [
        row for row in rows
        if matches_term(row, term, fields)
        and matches_status(row, status)
        and matches_category(row, category)
    ]


def distinct_categories(rows: Sequence[Dict]) -> List[str]:
    """``["all", ...]`` followed by each observed category in first-seen order"""
    seen = []
    for row in rows:
        category = row.get('category')
        if category is not None and category not in seen:
            seen.append(category)
    return [ALL] + seen


def active_only(rows: Sequence[Dict]) -> List[Dict]:
    """Rows flagged ``isActive``; applied before any public grouping"""
    return [row for row in rows if row.get('isActive') is True]


def category_slug(name: str) -> str:
    return re.sub(r'\s+', '-', name.strip().lower())


def category_buckets(active_rows: Sequence[Dict]) -> List[Dict]:
    """
    Group active rows into display tabs.

    Returns one synthetic "all" bucket followed by one bucket per distinct
    category, each with its count::

        [{'id': 'all', 'name': 'All Projects', 'count': 3},
         {'id': 'web-development', 'name': 'Web Development', 'count': 2}, ...]
    """
    counts = {}
    for row in active_rows:
        name = row.get('category') or ''
        counts[name] = counts.get(name, 0) + 1

    buckets = [{'id': ALL, 'name': ALL_BUCKET_NAME, 'count': len(active_rows)}]
    for name, count in counts.items():
        buckets.append({'id': category_slug(name), 'name': name, 'count': count})
    return buckets


def select_bucket(active_rows: Sequence[Dict], buckets: Sequence[Dict], bucket_id: str) -> List[Dict]:
    """Re-filter the already fetched active rows by a bucket id"""
    if not bucket_id or bucket_id == ALL:
        return list(active_rows)
    bucket = next((b for b in buckets if b['id'] == bucket_id), None)
    if bucket is None:
        return list(active_rows)
    wanted = bucket['name'].lower()
    return [row for row in active_rows if (row.get('category') or '').lower() == wanted]


def timeline(rows: Sequence[Dict], direction: str = 'desc') -> List[Dict]:
    """Sort experiences for display by ``order``; a null order counts as 0"""
    return sorted(rows, key=lambda row: row.get('order') or 0, reverse=(direction == 'desc'))


__all__ = [
    'split_list',
    'join_list',
    'filter_rows',
    'distinct_categories',
    'active_only',
    'category_slug',
    'category_buckets',
    'select_bucket',
    'timeline',
    'STATUS_OPTIONS'
]
