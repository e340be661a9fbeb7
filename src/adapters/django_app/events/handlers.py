"""
Event Handlers - Processadores de Eventos de Domínio.

Handlers são executados de forma assíncrona via Celery quando
Domain Events são publicados com EVENT_PUBLISHER_MODE=celery.

Todos os eventos de pessoas e usuários alimentam a trilha de
auditoria (logger "audit").

Padrão:
    @shared_task(bind=True, ...)
    def handle_<evento>(self, event_data: dict) -> None:
        # Processar evento
"""

import logging
from typing import Any, Dict

from celery import shared_task

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("audit")


def _dado(event_data: Dict[str, Any], chave: str) -> Any:
    return (event_data.get("data") or {}).get(chave)


def _registrar_auditoria(acao: str, event_data: Dict[str, Any], ator_id: Any) -> None:
    audit_logger.info(
        "%s | %s=%s | ator=%s | evento=%s | em=%s",
        acao,
        event_data.get("aggregate_type", "?"),
        event_data.get("aggregate_id"),
        ator_id or "-",
        event_data.get("event_id"),
        event_data.get("occurred_at"),
    )


# =============================================================================
# Event Handlers - Pessoas
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_pessoa_criada(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para PessoaCriadaEvent.

    Args:
        event_data: Dados do evento serializado
    """
    _registrar_auditoria("PESSOA_CRIADA", event_data, _dado(event_data, "criado_por_id"))


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_pessoa_atualizada(self, event_data: Dict[str, Any]) -> None:
    _registrar_auditoria("PESSOA_ATUALIZADA", event_data, _dado(event_data, "atualizado_por_id"))


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_pessoa_removida(self, event_data: Dict[str, Any]) -> None:
    _registrar_auditoria("PESSOA_REMOVIDA", event_data, _dado(event_data, "removido_por_id"))


# =============================================================================
# Event Handlers - Usuários
# =============================================================================

@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_usuario_registrado(self, event_data: Dict[str, Any]) -> None:
    """
    Handler para UsuarioRegistradoEvent.

    O próprio usuário é o ator do registro.
    """
    _registrar_auditoria("USUARIO_REGISTRADO", event_data, event_data.get("aggregate_id"))


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    acks_late=True,
)
def handle_usuario_removido(self, event_data: Dict[str, Any]) -> None:
    _registrar_auditoria("USUARIO_REMOVIDO", event_data, _dado(event_data, "removido_por_id"))


# =============================================================================
# Event Dispatcher (Router)
# =============================================================================

EVENT_HANDLERS = {
    "PessoaCriadaEvent": handle_pessoa_criada,
    "PessoaAtualizadaEvent": handle_pessoa_atualizada,
    "PessoaRemovidaEvent": handle_pessoa_removida,
    "UsuarioRegistradoEvent": handle_usuario_registrado,
    "UsuarioRemovidoEvent": handle_usuario_removido,
}


@shared_task(bind=True, max_retries=5, default_retry_delay=30)
def dispatch_domain_event(self, event_type: str, event_data: Dict[str, Any]) -> None:
    """
    Dispatcher central para Domain Events.

    Roteia eventos para os handlers apropriados.

    Args:
        event_type: Tipo do evento (ex: 'PessoaCriadaEvent')
        event_data: Dados do evento serializado
    """
    handler = EVENT_HANDLERS.get(event_type)

    if handler:
        logger.info("[DISPATCHER] Roteando %s para handler", event_type)
        handler.delay(event_data)
    else:
        logger.warning("[DISPATCHER] Handler não encontrado para %s", event_type)
