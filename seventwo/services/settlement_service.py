import logging
from typing import Dict, List, Sequence

from seventwo.core.config import settings
from seventwo.models.participant import Participant
from seventwo.models.settlement import Debt, SettlementTransaction
from seventwo.schemas.settlement import (
    PlayerStanding,
    SettlementResult,
    SettlementPreview,
    SettlementFinalization,
)
from seventwo.services.ledger_service import LedgerService
from seventwo.services.summary_service import EventSummaryService
from seventwo.utils.ledger_validation import SettlementError
from seventwo.utils.money import round_money, sum_money, format_money

logger = logging.getLogger(__name__)


class SettlementService:
    @staticmethod
    def resolve(participants: Sequence[Participant]) -> SettlementResult:
        """
        Converts final balances into the debts that settle the event.

        Only cashed-out participants take part. The sum of their balances is
        reported as ``balance_check`` and never corrected here; a nonzero
        value means the books are wrong and the caller must not finalize.
        """
        completed = [p for p in participants if p.is_cashed_out]
        if not completed:
            return SettlementResult()

        # 1. Net balance per player
        balances: List[Dict] = []
        total_pot = 0.0
        for participant in completed:
            buy_in = LedgerService.total_buy_in(participant)
            total_pot += buy_in
            balances.append({
                "user_id": participant.user_id,
                "user_name": participant.name,
                "balance": round_money(participant.cash_out_amount - buy_in),
            })

        # 2. Conservation check
        balance_check = sum_money(b["balance"] for b in balances)
        if abs(balance_check) >= settings.MONEY_TOLERANCE:
            logger.warning("Settlement balance check is %.2f, books do not balance", balance_check)

        # 3. Winners and losers, largest first; sorted() is stable so ties keep input order
        winners = sorted(
            ({**b, "amount": b["balance"]} for b in balances if b["balance"] > 0),
            key=lambda x: x["amount"],
            reverse=True,
        )
        losers = sorted(
            ({**b, "amount": -b["balance"]} for b in balances if b["balance"] < 0),
            key=lambda x: x["amount"],
            reverse=True,
        )

        # 4. Greedy matching of largest remaining winner and loser
        debts: List[Debt] = []
        i = 0
        j = 0

        while i < len(winners) and j < len(losers):
            winner = winners[i]
            loser = losers[j]

            amount = min(winner["amount"], loser["amount"])

            # Sub-cent transfers are dropped, not carried forward
            if amount > settings.MONEY_TOLERANCE:
                debts.append(Debt(
                    from_user_id=loser["user_id"],
                    from_user_name=loser["user_name"],
                    to_user_id=winner["user_id"],
                    to_user_name=winner["user_name"],
                    amount=round_money(amount),
                ))

            winner["amount"] -= amount
            loser["amount"] -= amount

            if winner["amount"] < settings.MONEY_TOLERANCE:
                i += 1
            if loser["amount"] < settings.MONEY_TOLERANCE:
                j += 1

        logger.debug("Resolved %d debt(s) for %d cashed-out player(s)", len(debts), len(completed))

        return SettlementResult(
            debts=debts,
            total_pot=round_money(total_pot),
            participants_count=len(completed),
            balance_check=balance_check,
            winners=[SettlementService._standing(w) for w in winners],
            losers=[SettlementService._standing(l) for l in losers],
        )

    @staticmethod
    def _standing(entry: Dict) -> PlayerStanding:
        return PlayerStanding(
            user_id=entry["user_id"],
            user_name=entry["user_name"],
            net_profit_loss=round_money(entry["balance"]),
        )

    @staticmethod
    def preview(participants: Sequence[Participant]) -> SettlementPreview:
        """What finalizing would produce right now, including any reason it would be refused."""
        check = EventSummaryService.check_can_settle(participants)
        result = SettlementService.resolve(participants)
        return SettlementPreview(
            can_settle=check.can_settle,
            reason=check.reason,
            debts=result.debts,
            total_pot=result.total_pot,
            balance_check=result.balance_check,
        )

    @staticmethod
    def finalize(event_id: str, participants: Sequence[Participant]) -> SettlementFinalization:
        """
        Produces the permanent settlement record for an event.

        Raises SettlementError when anyone is still playing, there are no
        participants, or the books don't balance. The returned transactions
        are what the caller persists; debts are not recomputed afterwards.
        """
        check = EventSummaryService.check_can_settle(participants)
        if not check.can_settle:
            logger.warning("Refused to settle event %s: %s", event_id, check.reason)
            raise SettlementError(
                check.reason or "Event cannot be settled",
                {
                    "participants_still_playing": check.summary.participants_still_playing,
                    "balance_check": check.summary.balance_check,
                    "is_balanced": check.summary.is_balanced,
                },
            )

        result = SettlementService.resolve(participants)
        # Per-player nets must also net to zero
        if abs(result.balance_check) >= settings.MONEY_TOLERANCE:
            raise SettlementError(
                f"Books don't balance. Discrepancy: {format_money(abs(result.balance_check))}",
                {"balance_check": result.balance_check, "is_balanced": False},
            )

        transactions = [
            SettlementTransaction(
                event_id=event_id,
                from_user_id=debt.from_user_id,
                to_user_id=debt.to_user_id,
                amount=debt.amount,
            )
            for debt in result.debts
        ]
        player_results = [
            PlayerStanding(
                user_id=p.user_id,
                user_name=p.name,
                net_profit_loss=LedgerService.net_profit_loss(p),
            )
            for p in participants
        ]

        logger.info("Settled event %s with %d transaction(s), pot %.2f", event_id, len(transactions), result.total_pot)
        return SettlementFinalization(
            event_id=event_id,
            debts_created=len(transactions),
            debts=result.debts,
            transactions=transactions,
            player_results=player_results,
        )

    @staticmethod
    def format_debt_summary(debts: Sequence[Debt]) -> str:
        if not debts:
            return "No debts to settle!"
        return "\n".join(
            f"{d.from_user_name} owes {d.to_user_name} {format_money(d.amount)}" for d in debts
        )

    @staticmethod
    def total_owed(debts: Sequence[Debt], user_id: str) -> float:
        """Total the user has to pay."""
        return sum_money(d.amount for d in debts if d.from_user_id == user_id)

    @staticmethod
    def total_owed_to(debts: Sequence[Debt], user_id: str) -> float:
        """Total the user is owed."""
        return sum_money(d.amount for d in debts if d.to_user_id == user_id)

    @staticmethod
    def debts_for_user(debts: Sequence[Debt], user_id: str) -> List[Debt]:
        return [d for d in debts if d.from_user_id == user_id or d.to_user_id == user_id]
