"""
User-facing notices.

Inside a Flask request, notices go through flask.flash so the next rendered
page can show them. Outside one (CLI rendering, warm-up) there is nobody to
show them to, so they are only logged at debug level.
"""

from __future__ import annotations

import logging

from flask import flash, has_request_context

logger = logging.getLogger(__name__)


class Messenger:
    ERROR = "error"
    STATUS = "status"

    def notify(self, message: str, is_error: bool = True) -> None:
        category = self.ERROR if is_error else self.STATUS
        if has_request_context():
            flash(message, category)
        else:
            logger.debug("notice outside request (%s): %s", category, message)


__all__ = ["Messenger"]
