import logging
from datetime import datetime
from typing import List, Optional, Sequence

from seventwo.core.config import settings
from seventwo.models.base import utcnow
from seventwo.models.participant import Participant
from seventwo.schemas.cash_out import CashOutValidation, CashOutRecord
from seventwo.services.ledger_service import LedgerService
from seventwo.utils.ledger_validation import CashOutError
from seventwo.utils.money import round_money, sum_money, is_zero, format_money

logger = logging.getLogger(__name__)


class CashOutService:
    @staticmethod
    def validate(
        amount: float,
        participant: Participant,
        participants: Sequence[Participant],
    ) -> CashOutValidation:
        """
        Checks a proposed cash-out against the rest of the event.

        Errors block the cash-out; warnings are advisory. When everyone else
        has already cashed out the balancing amount is known, so it is always
        returned as ``suggested_amount``.
        """
        errors: List[str] = []
        warnings: List[str] = []

        if amount < 0:
            errors.append("Cash-out amount cannot be negative")

        if participant.is_cashed_out:
            errors.append("Participant has already cashed out")

        total_buy_in = LedgerService.total_buy_in(participant)
        if is_zero(total_buy_in):
            errors.append("Participant has no buy-ins recorded")

        others = [p for p in participants if p.id != participant.id]
        total_event_buy_ins = sum_money(
            [total_buy_in, *(LedgerService.total_buy_in(p) for p in others)]
        )

        if amount - total_event_buy_ins > settings.MONEY_TOLERANCE:
            errors.append(
                f"Cash-out ({format_money(amount)}) exceeds total money in play "
                f"({format_money(total_event_buy_ins)})"
            )

        if others and all(p.is_cashed_out for p in others):
            others_cashed_out = sum_money(p.cash_out_amount for p in others)
            expected = round_money(total_event_buy_ins - others_cashed_out)

            if abs(amount - expected) > settings.MONEY_TOLERANCE:
                warnings.append(
                    f"As the last player, expected cash-out is {format_money(expected)} to balance the books"
                )

            return CashOutValidation(
                is_valid=not errors,
                errors=errors,
                warnings=warnings,
                suggested_amount=expected,
            )

        if total_buy_in > 0:
            profit_loss = amount - total_buy_in
            if profit_loss - total_buy_in * settings.LARGE_WIN_MULTIPLIER > settings.MONEY_TOLERANCE:
                warnings.append(
                    f"Large win detected: +{format_money(profit_loss)} "
                    f"({profit_loss / total_buy_in * 100:.0f}% profit)"
                )
            if is_zero(amount):
                warnings.append(f"Recording {format_money(0)} cash-out (complete loss)")

        return CashOutValidation(is_valid=not errors, errors=errors, warnings=warnings)

    @staticmethod
    def record(
        amount: float,
        participant: Participant,
        participants: Sequence[Participant],
        cashed_out_at: Optional[datetime] = None,
    ) -> CashOutRecord:
        """Validate and apply a cash-out; the returned participant is what the caller stores."""
        validation = CashOutService.validate(amount, participant, participants)
        if not validation.is_valid:
            logger.warning(
                "Rejected cash-out of %.2f for participant %s: %s",
                amount,
                participant.id,
                "; ".join(validation.errors),
            )
            raise CashOutError(validation.errors, validation.suggested_amount)

        amount = round_money(amount)
        updated = participant.model_copy(
            update={"cash_out_amount": amount, "cashed_out_at": cashed_out_at or utcnow()}
        )
        net = round_money(amount - LedgerService.total_buy_in(participant))

        logger.info("Recorded cash-out of %.2f for participant %s (net %+.2f)", amount, participant.id, net)
        return CashOutRecord(participant=updated, net_profit_loss=net, warnings=validation.warnings)
