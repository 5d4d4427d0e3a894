"""
List Manager - Admin list/search/edit state machine for one content collection

States::

    LOADING -> IDLE <-> FORM_OPEN -> SUBMITTING -> IDLE
               IDLE -> DELETING -> IDLE
               IDLE -> TOGGLING -> IDLE

The manager holds a disposable copy of the collection. Every mutation is a
single round trip; after it succeeds the local list is either re-fetched or
patched with the row the server returned, never with a locally computed one.
"""

import logging
import requests
from utils.listing import split_list, join_list, filter_rows, distinct_categories, STATUS_OPTIONS
from .api import ApiRequestError
from .dialogs import AlwaysConfirm, NotificationQueue

logger = logging.getLogger(__name__)

LOADING = 'loading'
IDLE = 'idle'
FORM_OPEN = 'form_open'
SUBMITTING = 'submitting'
DELETING = 'deleting'
TOGGLING = 'toggling'

CLIENT_ERRORS = (ApiRequestError, requests.RequestException)


class ManagerConfig:
    """Per-collection settings for a ``ListManager``"""

    def __init__(self, label, defaults, search_fields, list_fields=(), int_fields=(),
                 filter_kind=None, has_status=True, refetch=True):
        self.label = label
        self.defaults = defaults
        self.search_fields = tuple(search_fields)
        self.list_fields = tuple(list_fields)
        self.int_fields = tuple(int_fields)
        self.filter_kind = filter_kind  # 'status', 'category' or None
        self.has_status = has_status
        self.refetch = refetch


class Draft:
    """In-progress form values, detached from the persisted row until submit"""

    def __init__(self, values, row_id=None):
        self.values = values
        self.row_id = row_id

    @property
    def is_edit(self):
        return self.row_id is not None


class ListManager:
    def __init__(self, resource, config, confirm=None, notifier=None):
        self.resource = resource
        self.config = config
        self.confirm = confirm or AlwaysConfirm()
        self.notifier = notifier if notifier is not None else NotificationQueue()
        self.rows = []
        self.state = LOADING
        self.draft = None
        self.in_flight = False

    # Loading

    def mount(self):
        """Initial unconditional fetch of the whole collection"""
        self.state = LOADING
        self._fetch()
        self.state = IDLE
        return self.rows

    def refresh(self):
        return self._fetch()

    def _fetch(self):
        try:
            rows = self.resource.list()
        except CLIENT_ERRORS as e:
            logger.error(f"Error fetching {self.config.label}s: {e}")
            self.notifier.error(f"Failed to load {self.config.label}s.")
            return False
        self.rows = list(rows or [])
        return True

    def find(self, row_id):
        return next((row for row in self.rows if row.get('id') == row_id), None)

    # Form

    def open_create(self):
        if self.state != IDLE:
            return None
        self.draft = Draft(dict(self.config.defaults))
        self.state = FORM_OPEN
        return self.draft

    def open_edit(self, row_id):
        if self.state != IDLE:
            return None
        row = self.find(row_id)
        if row is None:
            return None

        values = {}
        for field, default in self.config.defaults.items():
            value = row.get(field)
            if field in self.config.list_fields:
                values[field] = join_list(value)
            elif value is None:
                values[field] = default
            else:
                values[field] = value
        self.draft = Draft(values, row_id=row_id)
        self.state = FORM_OPEN
        return self.draft

    def set_field(self, name, value):
        if self.draft is None:
            raise RuntimeError('No form is open')
        if name not in self.draft.values:
            raise KeyError(name)
        self.draft.values[name] = value

    def cancel(self):
        if self.state == FORM_OPEN:
            self.draft = None
            self.state = IDLE

    def build_payload(self):
        """Turn the draft back into an API payload"""
        payload = {}
        for field, value in self.draft.values.items():
            if field in self.config.list_fields:
                payload[field] = value if isinstance(value, list) else split_list(value)
            elif field in self.config.int_fields:
                payload[field] = None if value in (None, '') else int(value)
            else:
                payload[field] = value
        return payload

    def submit(self):
        """Create or update from the draft; on failure the form stays open"""
        if self.state != FORM_OPEN or self.in_flight:
            return False

        label = self.config.label
        try:
            payload = self.build_payload()
        except (TypeError, ValueError):
            self.notifier.error(f"Invalid {label} values. Please check the form.")
            return False

        self.state = SUBMITTING
        self.in_flight = True
        try:
            if self.draft.is_edit:
                saved = self.resource.update(self.draft.row_id, payload)
            else:
                saved = self.resource.create(payload)
        except CLIENT_ERRORS as e:
            logger.error(f"Error saving {label}: {e}")
            self.notifier.error(f"Failed to save {label}. Please try again.")
            self.state = FORM_OPEN
            return False
        finally:
            self.in_flight = False

        was_edit = self.draft.is_edit
        if self.config.refetch:
            self._fetch()
        elif was_edit:
            self.rows = [saved if row.get('id') == saved.get('id') else row for row in self.rows]
        else:
            self.rows = self.rows + [saved]

        self.draft = None
        self.state = IDLE
        self.notifier.success(f"{label.capitalize()} {'updated' if was_edit else 'created'} successfully!")
        return True

    # Row actions

    def delete(self, row_id):
        """Delete after an explicit confirmation"""
        if self.state != IDLE:
            return False
        label = self.config.label
        if not self.confirm(f"Are you sure you want to delete this {label}?"):
            return False

        self.state = DELETING
        try:
            self.resource.delete(row_id)
        except CLIENT_ERRORS as e:
            logger.error(f"Error deleting {label} {row_id}: {e}")
            self.notifier.error(f"Failed to delete {label}. Please try again.")
            self.state = IDLE
            return False

        if self.config.refetch:
            self._fetch()
        else:
            self.rows = [row for row in self.rows if row.get('id') != row_id]
        self.state = IDLE
        self.notifier.success(f"{label.capitalize()} deleted successfully!")
        return True

    def toggle(self, row_id):
        """Flip ``isActive`` and keep whatever the server answered"""
        if self.state != IDLE or not self.config.has_status:
            return False
        row = self.find(row_id)
        if row is None:
            return False

        self.state = TOGGLING
        try:
            updated = self.resource.patch(row_id, {'isActive': not row.get('isActive')})
        except CLIENT_ERRORS as e:
            logger.error(f"Error updating {self.config.label} {row_id} status: {e}")
            self.notifier.error('Failed to update status. Please try again.')
            self.state = IDLE
            return False

        self.rows = [updated if r.get('id') == row_id else r for r in self.rows]
        self.state = IDLE
        return True

    # Derived views

    def view(self, term='', selection='all'):
        """Filtered projection of the current rows; the rows are untouched"""
        kind = self.config.filter_kind
        return filter_rows(
            self.rows,
            term,
            self.config.search_fields,
            status=selection if kind == 'status' else 'all',
            category=selection if kind == 'category' else 'all'
        )

    def filter_options(self):
        if self.config.filter_kind == 'category':
            return distinct_categories(self.rows)
        if self.config.filter_kind == 'status':
            return list(STATUS_OPTIONS)
        return []

    def counts(self):
        total = len(self.rows)
        if self.config.has_status:
            active = sum(1 for row in self.rows if row.get('isActive'))
            return {'total': total, 'active': active, 'inactive': total - active}
        linked = sum(1 for row in self.rows if row.get('link'))
        return {'total': total, 'withLink': linked, 'withoutLink': total - linked}


SKILLS = ManagerConfig(
    label='skill',
    defaults={'title': '', 'skills': '', 'link': ''},
    search_fields=('title', 'skills'),
    has_status=False,
)

EXPERIENCES = ManagerConfig(
    label='experience',
    defaults={
        'title': '', 'company': '', 'startDate': '', 'description': '',
        'tools': '', 'isActive': False, 'order': ''
    },
    search_fields=('title', 'company', 'description'),
    list_fields=('tools',),
    int_fields=('order',),
    filter_kind='status',
)

PORTFOLIOS = ManagerConfig(
    label='portfolio',
    defaults={
        'title': '', 'description': '', 'technologies': '', 'category': '',
        'imageUrls': '', 'projectUrl': '', 'githubUrl': '', 'isActive': True
    },
    search_fields=('title', 'description'),
    list_fields=('technologies', 'imageUrls'),
    filter_kind='category',
    refetch=False,
)


def skills_manager(api, **kwargs):
    return ListManager(api.resource('skills'), SKILLS, **kwargs)


def experiences_manager(api, **kwargs):
    return ListManager(api.resource('experiences'), EXPERIENCES, **kwargs)


def portfolios_manager(api, **kwargs):
    return ListManager(api.resource('portfolios'), PORTFOLIOS, **kwargs)
