import httpx
from fastapi import APIRouter, Depends, HTTPException, status

from ..deps import get_payment_service, get_seat_reservation_service
from ..domain.errors import InvalidPurchaseRequestError
from ..domain.gateways import SeatReservationService, TicketPaymentService
from ..schemas import PurchaseCreate, PurchaseRead
from ..usecases import purchases as purchase_usecase
from ..utils.audit_log import emit_audit_log

router = APIRouter(prefix="", tags=["purchases"])


@router.post("/purchases", response_model=PurchaseRead, status_code=status.HTTP_201_CREATED)
def purchase_tickets(
    payload: PurchaseCreate,
    payment_service: TicketPaymentService = Depends(get_payment_service),
    seat_reservation_service: SeatReservationService = Depends(get_seat_reservation_service),
) -> PurchaseRead:
    try:
        receipt = purchase_usecase.purchase_tickets(
            payment_service,
            seat_reservation_service,
            request=payload.to_domain(),
        )
    except InvalidPurchaseRequestError as exc:
        try:
            emit_audit_log(
                action="purchase.rejected",
                account_id=payload.account_id,
                reason=exc.reason,
            )
        except RuntimeError as log_exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="audit log failed"
            ) from log_exc
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc.reason))
    except httpx.HTTPError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="upstream collaborator failed"
        ) from exc

    try:
        emit_audit_log(
            action="purchase.completed",
            account_id=receipt.account_id,
            total_tickets=receipt.division.total,
            seats_reserved=receipt.seats_reserved,
            amount=receipt.amount_paid,
        )
    except RuntimeError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="audit log failed") from exc

    return PurchaseRead.from_receipt(receipt)
