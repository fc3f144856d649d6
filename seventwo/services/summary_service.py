import logging
from typing import Sequence

from seventwo.models.participant import Participant
from seventwo.schemas.event import EventFinancialSummary, SettlementCheck, EventLedgerSummary
from seventwo.services.ledger_service import LedgerService
from seventwo.utils.money import round_money, is_zero, format_money

logger = logging.getLogger(__name__)


class EventSummaryService:
    @staticmethod
    def calculate(participants: Sequence[Participant]) -> EventFinancialSummary:
        """
        Event-wide totals in a single pass over the participants.

        ``balance_check`` is only computed once nobody is still playing;
        until then the outstanding cash-outs account for the gap and it is
        reported as 0.
        """
        total_buy_ins = 0.0
        total_cash_outs = 0.0
        cashed_out = 0

        for participant in participants:
            total_buy_ins += LedgerService.total_buy_in(participant)
            if participant.is_cashed_out:
                total_cash_outs += participant.cash_out_amount
                cashed_out += 1

        still_playing = len(participants) - cashed_out
        balance_check = round_money(total_buy_ins - total_cash_outs) if still_playing == 0 else 0.0

        return EventFinancialSummary(
            total_buy_ins=round_money(total_buy_ins),
            total_cash_outs=round_money(total_cash_outs),
            money_in_play=round_money(total_buy_ins - total_cash_outs),
            balance_check=balance_check,
            is_balanced=is_zero(balance_check),
            participants_count=len(participants),
            participants_cashed_out=cashed_out,
            participants_still_playing=still_playing,
            can_settle=still_playing == 0 and len(participants) > 0,
        )

    @staticmethod
    def check_can_settle(participants: Sequence[Participant]) -> SettlementCheck:
        """Settle-readiness with a human-readable reason when not ready."""
        summary = EventSummaryService.calculate(participants)

        if summary.participants_count == 0:
            return SettlementCheck(can_settle=False, reason="No participants in this event", summary=summary)

        if summary.participants_still_playing > 0:
            return SettlementCheck(
                can_settle=False,
                reason=f"{summary.participants_still_playing} player(s) still need to cash out",
                summary=summary,
            )

        if not summary.is_balanced:
            logger.warning("Books do not balance: discrepancy %.2f", summary.balance_check)
            return SettlementCheck(
                can_settle=False,
                reason=f"Books don't balance. Discrepancy: {format_money(abs(summary.balance_check))}",
                summary=summary,
            )

        return SettlementCheck(can_settle=True, summary=summary)

    @staticmethod
    def ledger_summary(event_id: str, participants: Sequence[Participant]) -> EventLedgerSummary:
        summary = EventSummaryService.calculate(participants)
        return EventLedgerSummary(
            **summary.model_dump(),
            event_id=event_id,
            participants=[LedgerService.participant_summary(p) for p in participants],
        )
