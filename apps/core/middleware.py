import logging

from django.shortcuts import render

from .models import AuditLog
from .services import PlatformConfigService

logger = logging.getLogger("apps.core")

AUDITED_METHODS = ('POST', 'PUT', 'PATCH', 'DELETE')


class AuditMiddleware:
    """Record every mutating request made by a signed-in user."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        user = getattr(request, 'user', None)
        if user is not None and user.is_authenticated and request.method in AUDITED_METHODS:
            self.log_action(request, response)

        return response

    def log_action(self, request, response):
        resolver_match = request.resolver_match
        target_id = ""
        target_model = ""
        if resolver_match:
            target_model = resolver_match.url_name or ""
            if resolver_match.kwargs:
                target_id = str(resolver_match.kwargs.get('pk', '') or resolver_match.kwargs.get('slug', ''))

        # Request bodies are never stored: they carry passwords and student data.
        details = {
            'path': request.path,
            'method': request.method,
            'status_code': response.status_code,
            'query_params': dict(request.GET),
        }

        try:
            AuditLog.objects.create(
                actor=request.user,
                action=f"{request.method} {request.path}",
                target_model=target_model,
                target_id=target_id,
                details=details,
                ip_address=self.get_client_ip(request),
            )
        except Exception:
            logger.exception("Audit log write failed for %s %s", request.method, request.path)

    def get_client_ip(self, request):
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            return x_forwarded_for.split(',')[0].strip()
        return request.META.get('REMOTE_ADDR')


class MaintenanceModeMiddleware:
    """
    While PlatformConfig.maintenance_mode is on, public visitors get a 503
    maintenance page. Signed-in staff, the admin and the login pages stay
    reachable so the switch can be turned off again.
    """
    EXEMPT_PREFIXES = ('/admin/', '/accounts/', '/core/', '/static/', '/__reload__/')

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        config = PlatformConfigService.get_config()
        user = getattr(request, 'user', None)
        if (
            config.maintenance_mode
            and not (user is not None and user.is_authenticated)
            and not request.path.startswith(self.EXEMPT_PREFIXES)
        ):
            return render(request, 'maintenance.html', {'message': config.maintenance_message}, status=503)
        return self.get_response(request)
