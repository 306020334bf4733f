"""Testes para api.payload_builders.paypal.

Cobre: MassPayPayloadBuilder, build_mass_pay_fields e factory.
"""

from __future__ import annotations

import pytest

from api.payload_builders.paypal import (
    MassPayPayloadBuilder,
    build_mass_pay_fields,
    get_payload_builder,
)
from app.domain.mass_pay import MassPayRequest
from utils.errors import MassPayArityError


def _request(**kwargs) -> MassPayRequest:
    params = {
        "receiver_identifiers": ["a@x.com", "b@x.com"],
        "amounts": [10, 20],
        "email_subject": "Pagamento de comissões",
    }
    params.update(kwargs)
    return MassPayRequest(**params)


class TestMassPayPayloadBuilder:
    """Serialização para campos planos."""

    def test_email_receivers(self) -> None:
        """Recebedores por email usam l_email{i}."""
        result = MassPayPayloadBuilder().build(_request())
        assert result == {
            "method": "MassPay",
            "receivertype": "EmailAddress",
            "currency_code": "USD",
            "email_subject": "Pagamento de comissões",
            "l_email0": "a@x.com",
            "l_amt0": 10,
            "l_email1": "b@x.com",
            "l_amt1": 20,
        }

    def test_user_id_receivers(self) -> None:
        """Recebedores por UserID usam l_receiverid{i}."""
        result = MassPayPayloadBuilder().build(_request(receiver_type="UserID"))
        assert result["receivertype"] == "UserID"
        assert result["l_receiverid0"] == "a@x.com"
        assert result["l_receiverid1"] == "b@x.com"
        assert not any(key.startswith("l_email") for key in result)

    def test_receivertype_is_plain_str(self) -> None:
        """receivertype sai como str simples."""
        result = MassPayPayloadBuilder().build(_request())
        assert type(result["receivertype"]) is str

    def test_unique_ids_and_notes(self) -> None:
        """Campos opcionais indexados quando presentes."""
        result = MassPayPayloadBuilder().build(
            _request(unique_ids=["u-1", "u-2"], notes=["obrigado", "valeu"])
        )
        assert result["l_uniqueid0"] == "u-1"
        assert result["l_uniqueid1"] == "u-2"
        assert result["l_note0"] == "obrigado"
        assert result["l_note1"] == "valeu"

    def test_optional_fields_absent(self) -> None:
        """Sem unique_ids/notes não há chaves l_uniqueid/l_note."""
        result = MassPayPayloadBuilder().build(_request())
        assert not any(key.startswith(("l_uniqueid", "l_note")) for key in result)

    def test_custom_currency(self) -> None:
        """currency_code informado é repassado."""
        result = MassPayPayloadBuilder().build(_request(currency_code="BRL"))
        assert result["currency_code"] == "BRL"

    def test_email_subject_none_kept(self) -> None:
        """email_subject ausente continua como chave com None."""
        result = MassPayPayloadBuilder().build(_request(email_subject=None))
        assert "email_subject" in result
        assert result["email_subject"] is None

    def test_empty_receivers_only_fixed_fields(self) -> None:
        """Zero recebedores: apenas os quatro campos fixos."""
        result = MassPayPayloadBuilder().build(
            MassPayRequest(receiver_identifiers=[], amounts=[], email_subject="x")
        )
        assert set(result) == {"method", "receivertype", "currency_code", "email_subject"}

    def test_idempotent(self) -> None:
        """Duas chamadas geram o mesmo mapeamento."""
        req = _request(notes=["a", "b"])
        builder = MassPayPayloadBuilder()
        assert builder.build(req) == builder.build(req)

    def test_rechecks_arity_before_build(self) -> None:
        """Lista alterada após a construção falha na serialização."""
        req = _request()
        object.__setattr__(req, "amounts", (10, 20, 30))
        with pytest.raises(MassPayArityError) as exc_info:
            MassPayPayloadBuilder().build(req)
        assert str(exc_info.value) == (
            "Arity mismatch: 2 user identifiers, but amounts has 3 values"
        )

    def test_rechecks_every_mismatch_before_build(self) -> None:
        """Serialização lista todas as listas divergentes, unidas por "and"."""
        req = _request(notes=["n1", "n2"])
        object.__setattr__(req, "amounts", (10, 20, 30))
        object.__setattr__(req, "notes", ("n1",))
        with pytest.raises(MassPayArityError) as exc_info:
            MassPayPayloadBuilder().build(req)
        assert str(exc_info.value) == (
            "Arity mismatch: 2 user identifiers, but amounts has 3 values"
            " and notes has 1 values"
        )

    def test_arity_uses_cached_receiver_count(self) -> None:
        """Aridade esperada é a da construção, não a atual."""
        req = _request()
        object.__setattr__(req, "receiver_identifiers", ("a@x.com", "b@x.com", "c@x.com"))
        result = MassPayPayloadBuilder().build(req)
        assert "l_email2" not in result
        assert result["l_email1"] == "b@x.com"


class TestBuildMassPayFields:
    """Atalho module-level."""

    def test_matches_builder(self) -> None:
        """Mesmo resultado que o builder."""
        req = _request()
        assert build_mass_pay_fields(req) == MassPayPayloadBuilder().build(req)


class TestFactory:
    """get_payload_builder por método NVP."""

    def test_mass_pay_builder(self) -> None:
        """MassPay retorna MassPayPayloadBuilder."""
        assert isinstance(get_payload_builder("MassPay"), MassPayPayloadBuilder)

    def test_unknown_method(self) -> None:
        """Método não suportado retorna None."""
        assert get_payload_builder("DoDirectPayment") is None
