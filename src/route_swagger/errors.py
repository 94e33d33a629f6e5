"""Exceptions raised while building an API document."""


class SwaggerError(Exception):
    """Base class for all route-swagger errors."""


class ConfigError(SwaggerError):
    """The generator configuration is unusable."""


class InvalidAuthFlowError(ConfigError):
    """The configured OAuth flow is not one Swagger 2.0 knows about."""


class UnsupportedFormatError(SwaggerError):
    """Requested output format has no formatter."""


class DocBlockError(SwaggerError):
    """A handler docstring could not be parsed."""
