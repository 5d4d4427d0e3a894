"""
Dialogs - Confirmation and notification services for the list-managers

A confirmation service is any callable ``confirm(message) -> bool``.
Notifications are queued instead of shown, so callers (a UI, a CLI,
a test) decide how to surface them.
"""

from collections import deque, namedtuple

Notification = namedtuple('Notification', ['level', 'message'])

INFO = 'info'
SUCCESS = 'success'
ERROR = 'error'


class AlwaysConfirm:
    def __call__(self, message):
        return True


class NeverConfirm:
    def __call__(self, message):
        return False


class ScriptedConfirm:
    """Answers from a fixed sequence and records every prompt"""

    def __init__(self, answers):
        self.answers = deque(answers)
        self.prompts = []

    def __call__(self, message):
        self.prompts.append(message)
        if not self.answers:
            return False
        return bool(self.answers.popleft())


class NotificationQueue:
    def __init__(self):
        self._items = deque()

    def push(self, level, message):
        self._items.append(Notification(level, message))

    def info(self, message):
        self.push(INFO, message)

    def success(self, message):
        self.push(SUCCESS, message)

    def error(self, message):
        self.push(ERROR, message)

    def drain(self):
        """Return and clear every pending notification, oldest first"""
        items = list(self._items)
        self._items.clear()
        return items

    def last(self):
        return self._items[-1] if self._items else None

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))
