"""Testes para codificação NVP e modelos do conector PayPal."""

from __future__ import annotations

from decimal import Decimal

from api.connectors.paypal.models import NvpCredentials, NvpResponse
from api.connectors.paypal.nvp import decode_nvp_response, encode_nvp_request

CREDENTIALS = NvpCredentials(
    username="api_user",
    password="secret-pwd",
    signature="secret-sig",
    version="124.0",
)


class TestEncodeNvpRequest:
    """encode_nvp_request."""

    def test_uppercases_keys_and_adds_credentials(self) -> None:
        """Chaves em maiúsculas e credenciais incluídas."""
        body = encode_nvp_request(
            {"method": "MassPay", "l_email0": "a@x.com", "l_amt0": 10},
            CREDENTIALS,
        )
        assert body == {
            "METHOD": "MassPay",
            "L_EMAIL0": "a@x.com",
            "L_AMT0": "10",
            "USER": "api_user",
            "PWD": "secret-pwd",
            "SIGNATURE": "secret-sig",
            "VERSION": "124.0",
        }

    def test_drops_none_values(self) -> None:
        """email_subject None não vai no corpo."""
        body = encode_nvp_request({"method": "MassPay", "email_subject": None}, CREDENTIALS)
        assert "EMAILSUBJECT" not in body
        assert "EMAIL_SUBJECT" not in body

    def test_uses_paypal_wire_names(self) -> None:
        """currency_code e email_subject seguem os nomes NVP do PayPal."""
        body = encode_nvp_request(
            {
                "method": "MassPay",
                "receivertype": "EmailAddress",
                "currency_code": "USD",
                "email_subject": "Repasse",
                "l_uniqueid0": "u0",
            },
            CREDENTIALS,
        )
        assert body["CURRENCYCODE"] == "USD"
        assert body["EMAILSUBJECT"] == "Repasse"
        assert body["RECEIVERTYPE"] == "EmailAddress"
        assert body["L_UNIQUEID0"] == "u0"
        assert "CURRENCY_CODE" not in body
        assert "EMAIL_SUBJECT" not in body

    def test_formats_amounts(self) -> None:
        """float e Decimal sem notação científica."""
        body = encode_nvp_request(
            {"l_amt0": 12.5, "l_amt1": Decimal("0.10"), "l_amt2": 1e-05},
            CREDENTIALS,
        )
        assert body["L_AMT0"] == "12.5"
        assert body["L_AMT1"] == "0.10"
        assert body["L_AMT2"] == "0.00001"

    def test_credentials_override_fields(self) -> None:
        """Campo homônimo não sobrescreve credencial."""
        body = encode_nvp_request({"user": "intruso"}, CREDENTIALS)
        assert body["USER"] == "api_user"


class TestDecodeNvpResponse:
    """decode_nvp_response."""

    def test_decodes_success(self) -> None:
        """Resposta de sucesso URL-encoded."""
        fields = decode_nvp_response(
            "TIMESTAMP=2026%2d10%2d18T12%3a00%3a00Z&CORRELATIONID=abc123&ACK=Success&VERSION=124%2e0"
        )
        assert fields == {
            "TIMESTAMP": "2026-10-18T12:00:00Z",
            "CORRELATIONID": "abc123",
            "ACK": "Success",
            "VERSION": "124.0",
        }

    def test_empty_body(self) -> None:
        """Corpo vazio vira dict vazio."""
        assert decode_nvp_response("") == {}

    def test_keeps_blank_values(self) -> None:
        """Valores vazios são mantidos."""
        assert decode_nvp_response("ACK=Failure&L_SHORTMESSAGE0=") == {
            "ACK": "Failure",
            "L_SHORTMESSAGE0": "",
        }


class TestNvpModels:
    """NvpCredentials e NvpResponse."""

    def test_credentials_repr_hides_secrets(self) -> None:
        """repr não expõe senha nem assinatura."""
        text = repr(CREDENTIALS)
        assert "secret-pwd" not in text
        assert "secret-sig" not in text
        assert "api_user" in text

    def test_response_from_fields(self) -> None:
        """ACK, CORRELATIONID e TIMESTAMP extraídos."""
        response = NvpResponse.from_fields(
            {"ACK": "SuccessWithWarning", "CORRELATIONID": "c1", "TIMESTAMP": "t"}
        )
        assert response.ack == "SuccessWithWarning"
        assert response.correlation_id == "c1"
        assert response.timestamp == "t"
        assert response.is_success is True

    def test_failure_ack_not_success(self) -> None:
        """Failure não é sucesso; campos de erro ficam crus."""
        response = NvpResponse.from_fields({"ACK": "Failure", "L_ERRORCODE0": "10321"})
        assert response.is_success is False
        assert response.fields["L_ERRORCODE0"] == "10321"

    def test_missing_ack(self) -> None:
        """Sem ACK, ack vazio e sem sucesso."""
        response = NvpResponse.from_fields({})
        assert response.ack == ""
        assert response.is_success is False
