"""Settings do gcp_logfmt.

Configuração é sempre programática: não há leitura de env vars.

Uso:
    from gcp_logfmt.config.settings import FormatterConfig

    config = FormatterConfig(pretty_print=True)
"""

from gcp_logfmt.config.settings.formatter import (
    DEFAULT_FORMATTER_CONFIG,
    CallerPrettyfier,
    FormatterConfig,
    get_formatter_config,
)

__all__ = [
    "DEFAULT_FORMATTER_CONFIG",
    "CallerPrettyfier",
    "FormatterConfig",
    "get_formatter_config",
]
