import json
from typing import Any, List

import pytest
from ticket_service.domain.errors import PurchaseRejection
from ticket_service.utils import audit_log
from ticket_service.utils.request_context import bind_request_id


class DummyLogger:
    def __init__(self) -> None:
        self.messages: List[str] = []

    def info(self, message: str) -> None:
        self.messages.append(message)


def test_emit_audit_log_outputs_compact_json(monkeypatch: pytest.MonkeyPatch) -> None:
    dummy_logger = DummyLogger()
    monkeypatch.setattr(audit_log, "_audit_logger", dummy_logger)

    bind_request_id("req-123")
    try:
        audit_log.emit_audit_log(
            action="purchase.completed",
            account_id=4,
            total_tickets=4,
            seats_reserved=3,
            amount=50,
        )
    finally:
        bind_request_id(None)

    assert len(dummy_logger.messages) == 1
    payload = json.loads(dummy_logger.messages[0])
    assert payload["action"] == "purchase.completed"
    assert payload["request_id"] == "req-123"
    assert payload["seats_reserved"] == 3
    assert payload["amount"] == 50
    assert "reason" not in payload
    assert "timestamp" in payload


def test_emit_audit_log_serialises_rejection_reason(monkeypatch: pytest.MonkeyPatch) -> None:
    dummy_logger = DummyLogger()
    monkeypatch.setattr(audit_log, "_audit_logger", dummy_logger)

    audit_log.emit_audit_log(
        action="purchase.rejected",
        account_id=9,
        reason=PurchaseRejection.ADULT_REQUIRED,
    )
    payload = json.loads(dummy_logger.messages[0])
    assert payload["reason"] == "adult required"
    assert payload["level"] == "warning"
    assert "request_id" not in payload
    assert "amount" not in payload


def test_emit_audit_log_raises_on_logger_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    class FailingLogger:
        def info(self, _: Any) -> None:
            raise ValueError("fail")

    monkeypatch.setattr(audit_log, "_audit_logger", FailingLogger())

    with pytest.raises(RuntimeError):
        audit_log.emit_audit_log(action="purchase.completed", account_id=1)
