"""autoresponder_core - email-marketing service adapters (connect / list / subscribe)"""

__version__ = "1.0.0"
