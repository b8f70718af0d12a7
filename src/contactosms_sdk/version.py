"""Version information for the ContactoSMS Python SDK"""

__version__ = "1.0.0"
