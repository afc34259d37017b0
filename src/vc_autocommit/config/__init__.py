"""
Configuration loading for vc_autocommit.

See :mod:`vc_autocommit.config.loader` for the file location and the
supported keys.
"""

from .loader import DEFAULT_CONFIG, ConfigError, load_config  # noqa: F401
