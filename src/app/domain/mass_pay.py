"""Modelo de domínio do pagamento em massa (MassPay).

Um MassPay paga N recebedores numa única chamada. Os dados de cada
recebedor chegam em listas paralelas alinhadas por índice:
``amounts[i]`` paga ``receiver_identifiers[i]``, e o mesmo vale para
``unique_ids`` e ``notes`` quando informados.

O objeto é imutável: as listas são convertidas em tuplas e a aridade
esperada (``expected_arity``) é fixada na construção.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from app.constants.paypal import ReceiverType
from utils.errors import MassPayArityError

if TYPE_CHECKING:
    from collections.abc import Sequence

Amount = int | float | Decimal

DEFAULT_CURRENCY_CODE = "USD"


@dataclass(frozen=True)
class MassPayRequest:
    """Requisição de MassPay validada quanto à aridade.

    Attributes:
        receiver_identifiers: Emails ou IDs PayPal dos recebedores (todos do
            mesmo tipo, o tipo não é verificado aqui).
        amounts: Valor a pagar para cada recebedor.
        receiver_type: Define o prefixo dos campos de identificador.
        currency_code: Código de moeda com 3 letras.
        email_subject: Assunto do email enviado a todos os recebedores.
        unique_ids: IDs únicos por transação (opcional).
        notes: Notas por transação (opcional).
        expected_arity: Nº de recebedores fixado na construção.

    Raises:
        MassPayArityError: Se alguma lista paralela tiver tamanho diferente
            do nº de recebedores.
    """

    receiver_identifiers: Sequence[str]
    amounts: Sequence[Amount]
    receiver_type: ReceiverType = ReceiverType.EMAIL_ADDRESS
    currency_code: str = DEFAULT_CURRENCY_CODE
    email_subject: str | None = None
    unique_ids: Sequence[str] | None = None
    notes: Sequence[str] | None = None
    expected_arity: int = field(init=False)

    def __post_init__(self) -> None:
        # frozen=True: normalização via object.__setattr__
        object.__setattr__(self, "receiver_identifiers", tuple(self.receiver_identifiers))
        object.__setattr__(self, "amounts", tuple(self.amounts))
        object.__setattr__(self, "receiver_type", ReceiverType(self.receiver_type))
        if self.unique_ids is not None:
            object.__setattr__(self, "unique_ids", tuple(self.unique_ids))
        if self.notes is not None:
            object.__setattr__(self, "notes", tuple(self.notes))

        object.__setattr__(self, "expected_arity", len(self.receiver_identifiers))
        self.check_arity()

    def check_arity(self) -> None:
        """Confere o tamanho de cada lista paralela contra ``expected_arity``.

        Lista todas as divergências na mensagem, não apenas a primeira.

        Raises:
            MassPayArityError: Se houver qualquer divergência.
        """
        n_recip = self.expected_arity
        bad_sizes: list[str] = []

        if len(self.amounts) != n_recip:
            bad_sizes.append(f"amounts has {len(self.amounts)} values")
        if self.unique_ids is not None and len(self.unique_ids) != n_recip:
            bad_sizes.append(f"unique_ids has {len(self.unique_ids)} values")
        if self.notes is not None and len(self.notes) != n_recip:
            bad_sizes.append(f"notes has {len(self.notes)} values")

        if bad_sizes:
            raise MassPayArityError(
                f"Arity mismatch: {n_recip} user identifiers, but " + " and ".join(bad_sizes)
            )

    @property
    def recipient_count(self) -> int:
        """Nº de recebedores (igual a ``expected_arity``)."""
        return self.expected_arity


__all__ = ["DEFAULT_CURRENCY_CODE", "Amount", "MassPayRequest"]
