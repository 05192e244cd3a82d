"""Utilitários compartilhados do gcp_logfmt."""
