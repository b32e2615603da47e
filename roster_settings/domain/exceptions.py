"""Domain exception hierarchy.

The tokenizer itself reports outcomes as ``Status`` values; these exceptions
belong to the layers around it (buffers, file loading, configuration).
"""


class DomainException(Exception):
    pass


class InvalidTokenBufferException(DomainException):
    pass


class SettingsFileLoadException(DomainException):
    pass


class ConfigurationException(DomainException):
    pass
