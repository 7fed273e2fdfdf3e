"""
Fake signature verifier.

Accepts exactly one signature value and parses a small JSON payload
built by `outcome_payload`.
"""
import json
from typing import Dict, List, Optional, Tuple, Union

from checkout.domain.enums import OutcomeKind
from checkout.domain.exceptions import InvalidSignature
from checkout.domain.ports.signature_verifier import ProviderEvent, SignatureVerifier

VALID_SIGNATURE = "sig_valid"


def outcome_payload(
    kind: Optional[OutcomeKind],
    reference_id: Optional[str],
    order_id: Optional[str],
    event_id: str = "evt_test_1",
    event_type: str = "payment_intent.test",
) -> str:
    """Build a payload understood by FakeSignatureVerifier."""
    metadata: Dict[str, str] = {}
    if order_id is not None:
        metadata["orderId"] = order_id
    return json.dumps(
        {
            "id": event_id,
            "type": event_type,
            "kind": kind.value if kind else None,
            "reference_id": reference_id,
            "metadata": metadata,
        }
    )


class FakeSignatureVerifier(SignatureVerifier):
    """Scripted SignatureVerifier for tests."""

    def __init__(self, valid_signature: str = VALID_SIGNATURE) -> None:
        self.valid_signature = valid_signature
        self.calls: List[Tuple[Union[bytes, str], Optional[str]]] = []

    def verify(
        self,
        raw_payload: Union[bytes, str],
        signature_header: Optional[str],
    ) -> ProviderEvent:
        self.calls.append((raw_payload, signature_header))
        if signature_header != self.valid_signature:
            raise InvalidSignature("Signature mismatch")

        data = json.loads(raw_payload)
        return ProviderEvent(
            event_id=data["id"],
            event_type=data["type"],
            kind=OutcomeKind(data["kind"]) if data.get("kind") else None,
            reference_id=data.get("reference_id"),
            metadata=data.get("metadata") or {},
        )
