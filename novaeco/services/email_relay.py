"""Contact notifications through the EmailJS REST API."""

import logging
import requests

logger = logging.getLogger(__name__)


class EmailRelay:
    """Sends contact form submissions to a hosted email template."""
    
    def __init__(self, api_url, service_id, template_id, public_key,
                 recipient_name, private_key=None, timeout=10):
        self.api_url = api_url
        self.service_id = service_id
        self.template_id = template_id
        self.public_key = public_key
        self.private_key = private_key
        self.recipient_name = recipient_name
        self.timeout = timeout
    
    @classmethod
    def from_config(cls, config):
        return cls(
            api_url=config['EMAILJS_API_URL'],
            service_id=config.get('EMAILJS_SERVICE_ID'),
            template_id=config.get('EMAILJS_TEMPLATE_ID'),
            public_key=config.get('EMAILJS_PUBLIC_KEY'),
            private_key=config.get('EMAILJS_PRIVATE_KEY'),
            recipient_name=config.get('EMAIL_RECIPIENT_NAME'),
            timeout=config.get('EMAIL_RELAY_TIMEOUT', 10),
        )
    
    @property
    def is_configured(self):
        return bool(self.service_id and self.template_id and self.public_key)
    
    def build_payload(self, name, email, message):
        payload = {
            'service_id': self.service_id,
            'template_id': self.template_id,
            'user_id': self.public_key,
            'template_params': {
                'from_name': name,
                'from_email': email,
                'message': message,
                'to_name': self.recipient_name,
            },
        }
        if self.private_key:
            payload['accessToken'] = self.private_key
        return payload
    
    def send_contact_notification(self, name, email, message):
        """Send one notification. Returns True on a 2xx answer."""
        if not self.is_configured:
            logger.warning('Email relay not configured, skipping notification from %s', email)
            return False
        
        try:
            response = requests.post(
                self.api_url,
                json=self.build_payload(name, email, message),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error('Email relay request failed: %s', e)
            return False
        
        if 200 <= response.status_code < 300:
            logger.info('Contact notification sent for %s', email)
            return True
        
        logger.error('Email relay error %s: %s', response.status_code, response.text)
        return False
