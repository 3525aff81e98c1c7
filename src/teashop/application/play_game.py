"""Application service: Play Game use case, the day/customer/order loop.

Drives one run of the shop through its states::

    NOT_STARTED -> DAY_IN_PROGRESS -> DAY_COMPLETE -> (next day | GAME_OVER)
                         |
                         +-> ABORTED -> GAME_OVER

Every side effect goes through an injected collaborator: the input
source, the display, the clock, the customer generator and the progress
store.  Storage failures never interrupt a run.
"""

from __future__ import annotations

import logging

from teashop.application import screens
from teashop.application.customer_generator import CustomerGenerator
from teashop.application.dto import GameReport
from teashop.application.ports import Clock, DisplaySink, InputSource
from teashop.application.progress_store import ProgressStore, SaveStatus
from teashop.application.settings import DEFAULT_SETTINGS, GameSettings
from teashop.domain.exceptions import GameAborted, ValidationError
from teashop.domain.model.achievements import AchievementTracker
from teashop.domain.model.game_state import DailyTally, GameState
from teashop.domain.model.leaderboard import Leaderboard
from teashop.domain.model.order import Customer
from teashop.domain.model.player import Player

logger = logging.getLogger(__name__)


class GameLoop:

    def __init__(
        self,
        player: Player,
        *,
        input_source: InputSource,
        display: DisplaySink,
        clock: Clock,
        customers: CustomerGenerator,
        store: ProgressStore,
        leaderboard: Leaderboard,
        achievements: AchievementTracker,
        settings: GameSettings = DEFAULT_SETTINGS,
    ) -> None:
        self._player = player
        self._input = input_source
        self._display = display
        self._clock = clock
        self._customers = customers
        self._store = store
        self._leaderboard = leaderboard
        self._achievements = achievements
        self._settings = settings
        self.state = GameState.NOT_STARTED

    def run(self) -> GameReport:
        """Play every day of the run, or until the player types the exit command."""
        if self.state != GameState.NOT_STARTED:
            raise ValidationError(
                f"Cannot start a run, current state is {self.state.value}"
            )

        tallies: list[DailyTally] = []
        aborted = False
        try:
            for day in range(1, self._settings.days_per_game + 1):
                tally = DailyTally(day=day)
                tallies.append(tally)
                self._play_day(tally)
                self._close_day(tally)
        except GameAborted:
            aborted = True
            self.state = GameState.ABORTED
            logger.debug("Run aborted by %s on day %d", self._player.username, len(tallies))

        return self._finish(tallies, aborted)

    # --- Day phases -----------------------------------------------------------

    def _play_day(self, tally: DailyTally) -> None:
        self.state = GameState.DAY_IN_PROGRESS
        logger.debug("Day %d started", tally.day)

        self._display.present(screens.day_transition(tally.day))
        self._clock.sleep(self._settings.day_transition_delay)

        for customer in self._customers.generate(self._settings.customers_per_day):
            self._display.present(screens.customer_arrival(customer))
            self._clock.sleep(self._settings.arrival_delay)
            self._serve(customer, tally)

    def _serve(self, customer: Customer, tally: DailyTally) -> None:
        """Take one order; raise GameAborted if the player asks to quit."""
        order = customer.order
        self._display.present(screens.take_order(customer))

        started = self._clock.now()
        answer = self._input.read_line()
        elapsed = self._clock.now() - started

        if answer.strip().lower() == self._settings.exit_command.lower():
            raise GameAborted(f"{self._player.username} closed the shop early")

        order.complete(order.check(answer), elapsed)
        earned = tally.record(customer)
        self._player.add_score(earned)
        logger.debug(
            "%s ordered %s: correct=%s elapsed=%.2fs earned=%d",
            customer.display_name, order.drink_name, order.was_correct, elapsed, earned,
        )

        self._display.present(screens.order_result(customer, earned))
        self._input.read_line()

        reaction = screens.happy_customer() if order.was_correct else screens.unhappy_customer()
        self._display.present(reaction)
        self._clock.sleep(self._settings.reaction_delay)

    def _close_day(self, tally: DailyTally) -> None:
        self.state = GameState.DAY_COMPLETE
        self._player.increment_days_played()

        self._display.present(
            screens.daily_summary(
                tally.day, tally.orders_made, tally.orders_missed, tally.score
            )
        )
        self._input.read_line()

        unlocked = self._achievements.check(self._player)
        if unlocked:
            self._display.present(screens.achievements_unlocked(unlocked))
            self._input.read_line()

        if self._store.save_player(self._player) is SaveStatus.FAILED:
            logger.warning("Progress for day %d was not saved", tally.day)

    # --- Game over ------------------------------------------------------------

    def _finish(self, tallies: list[DailyTally], aborted: bool) -> GameReport:
        self.state = GameState.GAME_OVER
        self._player.record_game()
        rating = self._player.calculate_rating()

        self._display.present(screens.ending(rating))
        self._clock.sleep(self._settings.ending_delay)

        self._leaderboard.add_entry(self._player.username, self._player.total_score)
        self._store.save_player(self._player)
        self._store.save_leaderboard(self._leaderboard.scores)

        return GameReport(
            days=tuple(tallies),
            total_score=self._player.total_score,
            rating=rating,
            aborted=aborted,
            final_state=self.state,
        )
