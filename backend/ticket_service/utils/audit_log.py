from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Literal, Optional

from .request_context import current_request_id

AuditAction = Literal[
    "purchase.completed",
    "purchase.rejected",
]

_audit_logger = logging.getLogger("audit")
_audit_logger.setLevel(logging.INFO)
if not _audit_logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    _audit_logger.addHandler(handler)
_audit_logger.propagate = False


def emit_audit_log(
    *,
    action: AuditAction,
    account_id: Optional[int],
    total_tickets: Optional[int] = None,
    seats_reserved: Optional[int] = None,
    amount: Optional[int] = None,
    reason: Optional[str] = None,
    extra: Optional[dict[str, Any]] = None,
) -> None:
    """Emit one JSON line per purchase outcome. Raises RuntimeError if logging fails."""
    payload: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "level": "info" if action == "purchase.completed" else "warning",
        "action": action,
        "request_id": current_request_id(),
        "account_id": account_id,
        "total_tickets": total_tickets,
        "seats_reserved": seats_reserved,
        "amount": amount,
        "reason": None if reason is None else str(reason),
    }
    if extra:
        payload.update(extra)

    compact_payload = {k: v for k, v in payload.items() if v is not None}
    try:
        _audit_logger.info(json.dumps(compact_payload, ensure_ascii=True))
    except Exception as exc:
        raise RuntimeError("failed to emit audit log") from exc
