import logging
from typing import List, Optional, Sequence

from seventwo.models.ledger import LedgerEntry
from seventwo.models.participant import Participant
from seventwo.schemas.ledger import LedgerAggregate, ParticipantSummary, BuyInRecord
from seventwo.utils.ledger_validation import BuyInError
from seventwo.utils.money import round_money, sum_money

logger = logging.getLogger(__name__)


class LedgerService:
    @staticmethod
    def aggregate(entries: Sequence[LedgerEntry]) -> LedgerAggregate:
        """
        Derives buy-in totals from an ordered ledger.

        The first entry is the initial buy-in and every later entry is a
        rebuy, whatever the entries' own ``is_rebuy`` flags say.
        """
        if not entries:
            return LedgerAggregate()

        initial, rebuys = entries[0], entries[1:]
        return LedgerAggregate(
            initial_buy_in=round_money(initial.amount),
            rebuy_count=len(rebuys),
            total_rebuys=sum_money(entry.amount for entry in rebuys),
            total_buy_in=sum_money(entry.amount for entry in entries),
            has_bought_in=True,
        )

    @staticmethod
    def total_buy_in(participant: Participant) -> float:
        return sum_money(entry.amount for entry in participant.buy_in_ledger)

    @staticmethod
    def classify_entries(entries: Sequence[LedgerEntry]) -> List[LedgerEntry]:
        """Return copies of the entries in creation order with ``is_rebuy`` recomputed."""
        ordered = sorted(entries, key=lambda entry: entry.created_at)
        return [
            entry if entry.is_rebuy == (index > 0) else entry.model_copy(update={"is_rebuy": index > 0})
            for index, entry in enumerate(ordered)
        ]

    @staticmethod
    def net_profit_loss(participant: Participant) -> float:
        """Cash-out minus total buy-in; 0 while the player is still playing."""
        if not participant.is_cashed_out:
            return 0.0
        return round_money(participant.cash_out_amount - LedgerService.total_buy_in(participant))

    @staticmethod
    def participant_summary(participant: Participant) -> ParticipantSummary:
        aggregate = LedgerService.aggregate(participant.ordered_ledger())
        return ParticipantSummary(
            **aggregate.model_dump(),
            participant_id=participant.id,
            user_id=participant.user_id,
            display_name=participant.name,
            cash_out=round_money(participant.cash_out_amount) if participant.is_cashed_out else None,
            net_profit_loss=LedgerService.net_profit_loss(participant),
            is_cashed_out=participant.is_cashed_out,
        )

    @staticmethod
    def record_buy_in(
        participant: Participant,
        amount: float,
        notes: Optional[str] = None,
    ) -> BuyInRecord:
        """
        Builds the ledger entry for a new buy-in or rebuy.

        Nothing is stored here; the caller persists ``ledger_entry``.
        """
        if participant.is_cashed_out:
            logger.warning("Refused buy-in for cashed-out participant %s", participant.id)
            raise BuyInError(
                "Cannot add buy-in for a participant who has already cashed out",
                {"participant_id": participant.id},
            )

        amount = round_money(amount)
        if amount <= 0:
            raise BuyInError("Buy-in amount must be positive", {"amount": amount})

        entry = LedgerEntry(
            participant_id=participant.id,
            amount=amount,
            is_rebuy=len(participant.buy_in_ledger) > 0,
            notes=notes or None,
        )
        total = sum_money([*(e.amount for e in participant.buy_in_ledger), entry.amount])

        logger.info(
            "Recorded %s of %.2f for participant %s (total %.2f)",
            "rebuy" if entry.is_rebuy else "buy-in",
            entry.amount,
            participant.id,
            total,
        )
        return BuyInRecord(ledger_entry=entry, participant_total_buy_in=total)
