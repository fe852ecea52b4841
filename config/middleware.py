"""
==========================================================
REQUEST LOGGING & IDLE TIMEOUT MIDDLEWARE
==========================================================
RequestLoggingMiddleware logs every HTTP request with timing, user info and
status code. Slow requests (>2s) and server errors (5xx) are flagged.

IdleTimeoutMiddleware signs staff out after a period without activity
(PlatformConfig.session_timeout_minutes, 30 by default).

Output → logs/requests.log, logs/security.log + console
"""

import time
import logging

from django.contrib import messages
from django.contrib.auth import logout
from django.shortcuts import redirect

from config.constants import IDLE_TIMEOUT_MINUTES, MSG_IDLE_LOGOUT

logger = logging.getLogger('middleware')
security_logger = logging.getLogger('apps.users')


def _username(request):
    user = getattr(request, 'user', None)
    return user.username if user and user.is_authenticated else 'anonymous'


class RequestLoggingMiddleware:
    """Log every request: method, path, user, status, duration."""

    SLOW_REQUEST_MS = 2000

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        start_time = time.time()
        method = request.method
        path = request.get_full_path()

        response = self.get_response(request)

        duration_ms = (time.time() - start_time) * 1000
        status = response.status_code
        msg = f"{method} {path} | user={_username(request)} | status={status} | {duration_ms:.0f}ms"

        if status >= 500:
            logger.error(f"SERVER ERROR: {msg}")
        elif status >= 400:
            logger.warning(f"CLIENT ERROR: {msg}")
        elif duration_ms > self.SLOW_REQUEST_MS:
            logger.warning(f"SLOW REQUEST: {msg}")
        else:
            logger.info(msg)

        return response

    def process_exception(self, request, exception):
        """Log unhandled exceptions with full context."""
        logger.critical(
            f"UNHANDLED EXCEPTION: {request.method} {request.get_full_path()} "
            f"| user={_username(request)} | error={type(exception).__name__}: {exception}",
            exc_info=True
        )
        return None


class IdleTimeoutMiddleware:
    """
    Expire an authenticated session after N idle minutes.
    The last activity time (epoch seconds) is kept in the session.
    """

    SESSION_KEY = '_last_activity'

    def __init__(self, get_response):
        self.get_response = get_response

    def _timeout_seconds(self):
        from core.services import PlatformConfigService
        minutes = PlatformConfigService.get_config().session_timeout_minutes or IDLE_TIMEOUT_MINUTES
        return minutes * 60

    def __call__(self, request):
        user = getattr(request, 'user', None)
        if user is not None and user.is_authenticated:
            now = int(time.time())
            last_activity = request.session.get(self.SESSION_KEY)
            if last_activity is not None and now - last_activity > self._timeout_seconds():
                username = user.username
                logout(request)
                messages.info(request, MSG_IDLE_LOGOUT)
                security_logger.info(f"Idle timeout: signed out user={username}")
                return redirect('login')
            request.session[self.SESSION_KEY] = now

        return self.get_response(request)
