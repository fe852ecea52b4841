from .services import PlatformConfigService


def platform_settings(request):
    """
    Make the admin-editable platform config available in all templates.
    """
    return {
        'PLATFORM_CONFIG': PlatformConfigService.get_config(),
        'CONTACT': PlatformConfigService.contact_details(),
    }
