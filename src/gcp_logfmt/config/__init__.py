"""Configuração do gcp_logfmt: settings do formatter e logging."""
