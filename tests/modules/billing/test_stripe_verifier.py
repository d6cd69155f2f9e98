# -*- coding: utf-8 -*-
"""
backend/tests/modules/billing/test_stripe_verifier.py

Tests de verify_stripe_event (firma Stripe-Signature sobre el body crudo).

Autor: Eaton Academic
Fecha: 2026-10-17
"""

import json
import time

import pytest

from backoffice.shared.errors import InvalidSignature, ValidationError
from backoffice.modules.billing.webhooks import verify_stripe_event

SECRET = "whsec_test_backoffice"


def test_valid_signature_returns_event(stripe_signer, checkout_event):
    body = checkout_event(event_id="evt_ok", invoice_id="3f2a1c9e-8f0b-4d47-9a55-1a2b3c4d5e6f")

    event = verify_stripe_event(body.encode("utf-8"), stripe_signer(body), SECRET)

    assert event.id == "evt_ok"
    assert event.type == "checkout.session.completed"
    assert event.data_object["metadata"]["invoice_id"] == "3f2a1c9e-8f0b-4d47-9a55-1a2b3c4d5e6f"
    assert event.livemode is False


def test_missing_header_is_rejected(checkout_event):
    with pytest.raises(InvalidSignature) as exc:
        verify_stripe_event(checkout_event().encode("utf-8"), None, SECRET)
    assert exc.value.message == "No signature"
    assert exc.value.status_code == 400


def test_wrong_secret_is_rejected(stripe_signer, checkout_event):
    body = checkout_event()
    with pytest.raises(InvalidSignature) as exc:
        verify_stripe_event(body.encode("utf-8"), stripe_signer(body, secret="whsec_other"), SECRET)
    assert exc.value.message == "Invalid signature"


def test_tampered_body_is_rejected(stripe_signer, checkout_event):
    body = checkout_event(amount_total=100)
    header = stripe_signer(body)
    tampered = body.replace('"amount_total": 100', '"amount_total": 1')
    with pytest.raises(InvalidSignature):
        verify_stripe_event(tampered.encode("utf-8"), header, SECRET)


def test_expired_timestamp_is_rejected(stripe_signer, checkout_event):
    body = checkout_event()
    header = stripe_signer(body, timestamp=int(time.time()) - 3600)
    with pytest.raises(InvalidSignature):
        verify_stripe_event(body.encode("utf-8"), header, SECRET, tolerance=300)


def test_signed_payload_without_data_object_is_invalid(stripe_signer):
    body = json.dumps({"id": "evt_x", "type": "checkout.session.completed", "data": []})
    with pytest.raises(ValidationError):
        verify_stripe_event(body.encode("utf-8"), stripe_signer(body), SECRET)

# Fin del archivo backend/tests/modules/billing/test_stripe_verifier.py
