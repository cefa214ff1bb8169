# csvview/logging/tags.py
"""
Central place for logging subsystem tags.

Tags prefix log messages so output stays searchable across modules.
"""

PARSER = "[PARSER]"
DELIMITER = "[DELIMITER]"
VIEW = "[VIEW]"
SERIALIZER = "[SERIALIZER]"
LOADER = "[LOADER]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
