from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    UNSUPPORTED_CHAIN = "unsupported_chain"
    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT_FAILURE = "transport_failure"
    UPSTREAM_REPORTED_ERROR = "upstream_reported_error"
    MISSING_DATA = "missing_data"


class DomainError(Exception):
    """Base para erros de dominio."""


class PoolTagsError(DomainError):
    """Falha na geracao das tags de pools."""

    kind: ErrorKind


class UnsupportedChainError(PoolTagsError):
    """Chain solicitada nao e suportada."""

    kind = ErrorKind.UNSUPPORTED_CHAIN


class MissingCredentialError(PoolTagsError):
    """API key do subgraph nao informada."""

    kind = ErrorKind.MISSING_CREDENTIAL


class PageSourceError(PoolTagsError):
    """Nao foi possivel obter uma pagina de pools."""

    kind = ErrorKind.TRANSPORT_FAILURE


class TransportFailureError(PageSourceError):
    """Resposta HTTP sem sucesso ou corpo invalido."""

    kind = ErrorKind.TRANSPORT_FAILURE


class UpstreamReportedError(PageSourceError):
    """Subgraph retornou erros junto com a resposta."""

    kind = ErrorKind.UPSTREAM_REPORTED_ERROR

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__(" | ".join(self.messages) or "Subgraph reported errors.")


class MissingDataError(PageSourceError):
    """Resposta sem a colecao esperada."""

    kind = ErrorKind.MISSING_DATA


ERROR_BY_KIND: dict[ErrorKind, type[PoolTagsError]] = {
    ErrorKind.UNSUPPORTED_CHAIN: UnsupportedChainError,
    ErrorKind.MISSING_CREDENTIAL: MissingCredentialError,
    ErrorKind.TRANSPORT_FAILURE: TransportFailureError,
    ErrorKind.MISSING_DATA: MissingDataError,
}
