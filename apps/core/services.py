from .models import PlatformConfig


class PlatformConfigService:
    @staticmethod
    def get_config():
        """
        Return the singleton PlatformConfig instance.
        """
        return PlatformConfig.load()

    @staticmethod
    def contact_details():
        """
        Contact block shown in the public footer and on the contact page.
        """
        config = PlatformConfig.load()
        return {
            'email': config.contact_email,
            'phone': config.support_phone,
            'address': config.address,
        }
