"""Builder para a operação MassPay da API NVP do PayPal."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.paypal import MASS_PAY_METHOD, ReceiverType

if TYPE_CHECKING:
    from app.domain.mass_pay import MassPayRequest

# Prefixo do campo de identificador por tipo de recebedor
_IDENTIFIER_KEY_PREFIX: dict[ReceiverType, str] = {
    ReceiverType.USER_ID: "l_receiverid",
    ReceiverType.EMAIL_ADDRESS: "l_email",
}


class MassPayPayloadBuilder:
    """Serializa um MassPayRequest nos campos planos esperados pelo PayPal."""

    def build(self, request: MassPayRequest) -> dict[str, Any]:
        """Constrói o mapeamento campo → valor da chamada MassPay.

        A aridade é conferida de novo antes de montar os campos.

        Args:
            request: Requisição de MassPay

        Returns:
            Campos planos, com dados por recebedor em chaves indexadas
            (``l_email0``, ``l_amt0``, ...). A ordem das chaves não tem
            significado.

        Raises:
            MassPayArityError: Se as listas paralelas divergirem em tamanho.
        """
        request.check_arity()

        fields: dict[str, Any] = {
            "method": MASS_PAY_METHOD,
            "receivertype": str(request.receiver_type),
            "currency_code": request.currency_code,
            "email_subject": request.email_subject,
        }

        id_prefix = _IDENTIFIER_KEY_PREFIX[request.receiver_type]
        for i in range(request.expected_arity):
            fields[f"{id_prefix}{i}"] = request.receiver_identifiers[i]
            fields[f"l_amt{i}"] = request.amounts[i]
            if request.unique_ids is not None:
                fields[f"l_uniqueid{i}"] = request.unique_ids[i]
            if request.notes is not None:
                fields[f"l_note{i}"] = request.notes[i]

        return fields


_MASS_PAY_BUILDER = MassPayPayloadBuilder()


def build_mass_pay_fields(request: MassPayRequest) -> dict[str, Any]:
    """Atalho para ``MassPayPayloadBuilder().build(request)``."""
    return _MASS_PAY_BUILDER.build(request)
