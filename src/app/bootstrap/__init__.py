"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, create_send_mass_pay_use_case

    # Na inicialização do serviço
    initialize_app()

    async with create_send_mass_pay_use_case() as use_case:
        result = await use_case.execute(request)
"""

from __future__ import annotations

import logging

from app.bootstrap.paypal_factory import create_send_mass_pay_use_case
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_paypal_settings

# Nome do serviço para logs
SERVICE_NAME = "paypal_masspay"

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.

    Configura:
    - Logging estruturado JSON com correlation_id
    - Validação das settings de runtime
    """
    base = get_base_settings()
    configure_logging(
        level="DEBUG" if base.debug else base.log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )
    validate_runtime_settings()


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes em nível DEBUG."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Se houver erros em ambiente estrito.
    """
    environment = get_base_settings().environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    base_errors = get_base_settings().validate()
    errors.extend(f"base: {error}" for error in base_errors)

    paypal_errors = get_paypal_settings().validate()
    errors.extend(f"paypal: {error}" for error in paypal_errors)

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


__all__ = [
    "SERVICE_NAME",
    "create_send_mass_pay_use_case",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
