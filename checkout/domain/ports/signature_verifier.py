"""Inbound provider message verification port."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from ..enums import OutcomeKind


@dataclass(frozen=True)
class ProviderEvent:
    """
    Provider event after signature verification.

    kind is None for event types the core does not reconcile.
    """
    event_id: str
    event_type: str
    kind: Optional[OutcomeKind]
    reference_id: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)


class SignatureVerifier(ABC):
    """Verifies and parses signed provider messages."""

    @abstractmethod
    def verify(self, raw_payload: Union[bytes, str], signature_header: Optional[str]) -> ProviderEvent:
        """
        Verify the signature and parse the payload.

        Raises:
            InvalidSignature: If the signature does not match or cannot be checked
        """
        pass
